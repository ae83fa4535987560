# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Products API:
# - test_products_api.py: Integration tests for the product endpoints
# - test_validation.py: Unit tests for the validation rule engine
# - test_database.py: Tests for the database handle lifecycle
# - test_middleware.py: CORS origin policy and request logging
# - test_models.py: Unit tests for Pydantic model validation
# - test_health.py: Health, root and OpenAPI documentation
# - test_config.py: Settings parsing
#
# Run tests with: pytest
# =============================================================================
