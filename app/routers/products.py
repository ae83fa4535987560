# =============================================================================
# app/routers/products.py - Product CRUD Endpoints
# =============================================================================
# Each route runs a ValidationChain (path params + JSON body) before its
# handler. Because the chains read the request themselves, the OpenAPI
# parameters and request bodies are declared explicitly through openapi_extra
# so /docs still documents them.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.dependencies import ProductServiceDep
from app.exceptions import ProductNotFoundError
from app.validation import ValidatedInput, ValidationChain
from core.models.product import (
    AvailabilityUpdate,
    ProductCreate,
    ProductDeleted,
    ProductResponse,
    ProductUpdate,
)
from lib.validation import (
    Rule,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    is_string,
    not_empty,
)

router = APIRouter()


# =============================================================================
# Validation Rules
# =============================================================================

ID_RULES = [
    Rule("path", "id", is_int, "Invalid product ID"),
]

NAME_RULES = [
    Rule("body", "name", is_string, "Product name must be a string", optional=True),
    Rule("body", "name", not_empty, "Product name cannot be empty"),
]

PRICE_RULES = [
    Rule("body", "price", is_numeric, "Invalid price value"),
    Rule("body", "price", not_empty, "Product price cannot be empty"),
    Rule("body", "price", is_positive, "Price must be greater than zero"),
]

AVAILABILITY_RULES = [
    Rule("body", "availability", is_boolean, "Invalid availability value"),
]

OPTIONAL_AVAILABILITY_RULES = [
    Rule("body", "availability", is_boolean, "Invalid availability value", optional=True),
]

validate_id = ValidationChain(ID_RULES)
validate_create = ValidationChain(NAME_RULES + PRICE_RULES + OPTIONAL_AVAILABILITY_RULES)
validate_update = ValidationChain(ID_RULES + NAME_RULES + PRICE_RULES + AVAILABILITY_RULES)
validate_patch = ValidationChain(ID_RULES + OPTIONAL_AVAILABILITY_RULES)


def _product_id(data: ValidatedInput) -> int:
    try:
        return data.int_param("id")
    except ValueError:
        # Too many digits for int(), so no stored product can have this id
        raise ProductNotFoundError(f"{data.params['id'][:20]}...")


# =============================================================================
# OpenAPI Annotations
# =============================================================================

ID_PARAMETER = {
    "in": "path",
    "name": "id",
    "required": True,
    "description": "The id of the product",
    "schema": {"type": "integer"},
}

BAD_REQUEST = {400: {"description": "Bad Request - invalid input data"}}
NOT_FOUND = {404: {"description": "Product not found"}}


def _openapi(
    with_id: bool = False,
    body: type[BaseModel] | None = None,
    example: dict[str, Any] | None = None,
    body_required: bool = True,
) -> dict[str, Any]:
    extra: dict[str, Any] = {}
    if with_id:
        extra["parameters"] = [ID_PARAMETER]
    if body is not None:
        content: dict[str, Any] = {"schema": body.model_json_schema()}
        if example is not None:
            content["example"] = example
        extra["requestBody"] = {
            "required": body_required,
            "content": {"application/json": content},
        }
    return extra


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "",
    response_model=list[ProductResponse],
    summary="Get a list of products",
)
async def get_products(service: ProductServiceDep):
    """
    Return every product ordered by id.

    Returns an empty list when no products exist.
    """
    return await service.list_products()


@router.get(
    "/{id}",
    response_model=ProductResponse,
    summary="Get a product by Id",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=_openapi(with_id=True),
)
async def get_product_by_id(
    data: Annotated[ValidatedInput, Depends(validate_id)],
    service: ProductServiceDep,
):
    """Return a product based on its unique ID."""
    return await service.get_product(_product_id(data))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=201,
    summary="Creates a new product",
    responses=BAD_REQUEST,
    openapi_extra=_openapi(
        body=ProductCreate,
        example={"name": "Monitor curvo de 49 pulgadas", "price": 399},
    ),
)
async def create_product(
    data: Annotated[ValidatedInput, Depends(validate_create)],
    service: ProductServiceDep,
):
    """
    Create a product.

    `availability` is optional and defaults to true.
    Returns the new record including its assigned id.
    """
    return await service.create_product(ProductCreate.model_validate(data.body))


@router.put(
    "/{id}",
    response_model=ProductResponse,
    summary="Updates a product with user input",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=_openapi(
        with_id=True,
        body=ProductUpdate,
        example={"name": "Monitor curvo de 49 pulgadas", "price": 399, "availability": True},
    ),
)
async def update_product(
    data: Annotated[ValidatedInput, Depends(validate_update)],
    service: ProductServiceDep,
):
    """Replace name, price and availability. Returns the updated product."""
    return await service.update_product(
        _product_id(data),
        ProductUpdate.model_validate(data.body),
    )


@router.patch(
    "/{id}",
    response_model=ProductResponse,
    summary="Updates availability",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=_openapi(
        with_id=True,
        body=AvailabilityUpdate,
        example={"availability": False},
        body_required=False,
    ),
)
async def update_availability(
    data: Annotated[ValidatedInput, Depends(validate_patch)],
    service: ProductServiceDep,
):
    """
    Update only the availability of a product.

    Without a body the current availability is toggled; with
    `{"availability": <bool>}` it is set to that value.
    """
    patch = AvailabilityUpdate.model_validate(data.body)
    return await service.update_availability(_product_id(data), patch.availability)


@router.delete(
    "/{id}",
    response_model=ProductDeleted,
    summary="Delete Product",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=_openapi(with_id=True),
)
async def delete_product(
    data: Annotated[ValidatedInput, Depends(validate_id)],
    service: ProductServiceDep,
):
    """Delete a product permanently."""
    product_id = _product_id(data)
    await service.delete_product(product_id)
    return ProductDeleted(id=product_id)
