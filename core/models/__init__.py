# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - product.py: Product create/update/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .product import (
    AvailabilityUpdate,
    ProductCreate,
    ProductDeleted,
    ProductResponse,
    ProductUpdate,
)

__all__ = [
    "AvailabilityUpdate",
    "ProductCreate",
    "ProductDeleted",
    "ProductResponse",
    "ProductUpdate",
]
