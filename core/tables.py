# =============================================================================
# core/tables.py - ORM Table Definitions
# =============================================================================
# SQLAlchemy mappings for the relational store. The API never returns these
# objects directly; routers serialize them through core.models.product.
# =============================================================================

from sqlalchemy import Boolean, Float, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from lib.database import Base


class Product(Base):
    """A product row. `id` is assigned by the database on insert."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    def __repr__(self) -> str:
        return f"<Product {self.id} {self.name!r}>"
