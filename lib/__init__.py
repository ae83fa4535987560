# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: Database handle owning the SQLAlchemy async engine
# - validation.py: Declarative field rules and the engine that evaluates them
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Base, Database
from lib.validation import Rule, evaluate_rules

__all__ = [
    # Database
    "Base",
    "Database",
    # Validation
    "Rule",
    "evaluate_rules",
]
