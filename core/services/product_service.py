# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Handles product CRUD operations.
# Separates HTTP concerns from database logic: routers validate input and
# serialize output, this service talks to the ORM.
# =============================================================================

import logging
from typing import NoReturn

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, ProductNotFoundError
from core.models.product import ProductCreate, ProductUpdate
from core.tables import Product

logger = logging.getLogger(__name__)

MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class ProductService:
    """
    Service for product operations.

    Bound to one AsyncSession per request; the session is injected by
    app/dependencies.py and owned by the caller.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_products(self) -> list[Product]:
        """
        List every product ordered by id ascending.

        Returns:
            All products (empty list if none exist)
        """
        try:
            result = await self.session.execute(select(Product).order_by(Product.id.asc()))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self._fail("list products", e)

    async def get_product(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If no product has this id
            DatabaseError: If the query fails
        """
        # Ids outside the 64-bit range cannot exist in the table
        if not MIN_ID <= product_id <= MAX_ID:
            raise ProductNotFoundError(product_id)

        try:
            product = await self.session.get(Product, product_id)
        except SQLAlchemyError as e:
            await self._fail(f"fetch product {product_id}", e)

        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create_product(self, data: ProductCreate) -> Product:
        """
        Insert a product.

        Returns:
            The created product with its assigned id
        """
        product = Product(
            name=data.name,
            price=data.price,
            availability=data.availability,
        )

        try:
            self.session.add(product)
            await self.session.commit()
            await self.session.refresh(product)
        except SQLAlchemyError as e:
            await self._fail("create product", e)

        logger.info(f"Created product: {product.id}")
        return product

    async def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        """
        Replace every mutable field of a product.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = await self.get_product(product_id)

        product.name = data.name
        product.price = data.price
        product.availability = data.availability

        await self._commit(product, f"update product {product_id}")
        logger.info(f"Updated product: {product_id}")
        return product

    async def update_availability(
        self,
        product_id: int,
        availability: bool | None = None,
    ) -> Product:
        """
        Set or toggle a product's availability.

        Args:
            product_id: The product id
            availability: New value; None toggles the current value

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = await self.get_product(product_id)

        if availability is None:
            product.availability = not product.availability
        else:
            product.availability = availability

        await self._commit(product, f"update availability of product {product_id}")
        logger.info(f"Product {product_id} availability set to {product.availability}")
        return product

    async def delete_product(self, product_id: int) -> None:
        """
        Hard-delete a product.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = await self.get_product(product_id)

        try:
            await self.session.delete(product)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail(f"delete product {product_id}", e)

        logger.info(f"Deleted product: {product_id}")

    async def _commit(self, product: Product, operation: str) -> None:
        try:
            await self.session.commit()
            await self.session.refresh(product)
        except SQLAlchemyError as e:
            await self._fail(operation, e)

    async def _fail(self, operation: str, error: SQLAlchemyError) -> NoReturn:
        logger.error(f"Failed to {operation}: {error}")
        try:
            await self.session.rollback()
        except SQLAlchemyError as rollback_error:
            logger.warning(f"Rollback after failed {operation} also failed: {rollback_error}")
        raise DatabaseError(operation, str(error)) from error
