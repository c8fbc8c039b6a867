# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Cache and service injection
# - exceptions.py: API exceptions and their JSON error bodies
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it maps HTTP requests onto core/ lookups and
# maps their results onto status codes.
# =============================================================================
