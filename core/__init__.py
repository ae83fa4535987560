# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the product domain:
# - models/: Pydantic schemas for the API contract
# - tables.py: SQLAlchemy ORM mappings
# - services/: Product CRUD operations over an injected session
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable and reusable.
# =============================================================================
