# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Tempus Bede API:
# - test_dates.py / test_dioceses.py: Input validation helpers
# - test_engine.py: Liturgical calendar computation
# - test_calendar_cache.py: Year memoization
# - test_normalizer.py / test_models.py: Response shaping
# - test_calendar_service.py: Day resolution outcomes
# - test_api.py: HTTP endpoints and error bodies
#
# Run tests with: pytest
# =============================================================================
