# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic calendar logic:
# - models/: Pydantic schemas and resolution results
# - services/: Calendar cache, day resolver and response normalizer
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
