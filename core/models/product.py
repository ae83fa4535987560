# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the API contract for product operations:
# - ProductCreate: Input for creating a product
# - ProductUpdate: Input for replacing every mutable field
# - AvailabilityUpdate: Optional input for the availability patch
# - ProductResponse: Output when returning product data to clients
# - ProductDeleted: Confirmation returned by the delete endpoint
#
# Field rules (non-empty name, positive price, ...) are enforced by the
# validation chains in app/routers/products.py before these models are built.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    """
    Schema for creating a product.

    Example:
        {
            "name": "Monitor curvo de 49 pulgadas",
            "price": 399
        }
    """

    name: str = Field(..., description="The product name", examples=["Monitor curvo de 49 pulgadas"])
    price: float = Field(..., description="The product price", examples=[399])

    # Optional on create; new products are available unless told otherwise
    availability: bool = Field(default=True, description="The product availability", examples=[True])


class ProductUpdate(BaseModel):
    """
    Schema for a full replacement of a product's mutable fields.

    Example:
        {
            "name": "Monitor curvo de 49 pulgadas",
            "price": 399,
            "availability": true
        }
    """

    name: str = Field(..., description="The product name", examples=["Monitor curvo de 49 pulgadas"])
    price: float = Field(..., description="The product price", examples=[399])
    availability: bool = Field(..., description="The product availability", examples=[True])


class AvailabilityUpdate(BaseModel):
    """
    Optional body for the availability patch.

    When availability is omitted the current value is toggled.
    """

    availability: bool | None = Field(
        default=None,
        description="New availability; omit to toggle the current value",
        examples=[False],
    )


class ProductResponse(BaseModel):
    """
    Schema for returning product data to clients.

    Returned by every product endpoint except delete.

    Example:
        {
            "id": 1,
            "name": "Monitor",
            "price": 300,
            "availability": true
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="The Product ID", examples=[1])
    name: str = Field(..., description="The Product name", examples=["Monitor"])
    price: float = Field(..., description="The Product price", examples=[300])
    availability: bool = Field(..., description="The Product availability", examples=[True])


class ProductDeleted(BaseModel):
    """Confirmation returned after a product is deleted."""

    id: int = Field(..., examples=[1])
    message: str = Field(default="Product deleted")
