# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Tempus Bede API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   python -m app.main          (or the tempus-bede console script)
#   uvicorn app.main:app --reload --port 3000
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from app.config import settings
from app.exceptions import (
    TempusBedeException,
    not_found_exception_handler,
    tempus_bede_exception_handler,
    validation_exception_handler,
)
from app.routers import calendar, date, dioceses, health, today
from lib.dioceses import list_dioceses

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The calendar cache fills lazily on first request, so startup only logs
    the effective configuration.
    """
    # Startup
    logger.info(f"Starting {settings.SERVICE_NAME} {settings.VERSION} in {settings.ENVIRONMENT} mode")
    logger.info(f"Default diocese: {settings.DEFAULT_DIOCESE}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.SERVICE_NAME}")


# Create FastAPI application
app = FastAPI(
    title="Tempus Bede API",
    description="""
## Catholic Liturgical Calendar API

Resolves the liturgical day (celebration, rank, season and colors) for any
date, following the General Roman Calendar and its national propers.

### Endpoints

| Endpoint | Returns |
|----------|---------|
| `GET /today` | Today's liturgical day (UTC) |
| `GET /date/{date}` | The liturgical day for a YYYY-MM-DD date |
| `GET /calendar/{year}` | Every liturgical day of a year |
| `GET /dioceses` | Supported diocese codes |

Every lookup accepts an optional `diocese` query parameter.

### Quick Start

```bash
curl http://localhost:3000/date/2026-12-25?diocese=united-states
```
""",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Liturgical Calendar",
            "description": "Resolve liturgical days by date or year",
        },
        {
            "name": "Dioceses",
            "description": "Supported national calendars",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TempusBedeException)
async def handle_tempus_bede_exception(request: Request, exc: TempusBedeException):
    """Handle custom Tempus Bede exceptions."""
    return await tempus_bede_exception_handler(request, exc)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Handle unknown routes and other framework HTTP errors."""
    return await not_found_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle invalid path and query parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "status": 500,
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Liturgical day lookups
app.include_router(today.router, tags=["Liturgical Calendar"])
app.include_router(date.router, tags=["Liturgical Calendar"])
app.include_router(calendar.router, tags=["Liturgical Calendar"])

# Diocese registry
app.include_router(dioceses.router, tags=["Dioceses"])

# Health check
app.include_router(health.router, tags=["Health"])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Tempus Bede API",
        "version": settings.VERSION,
        "description": "Catholic liturgical calendar API",
        "endpoints": {
            "today": "/today?diocese={diocese}",
            "date": "/date/{YYYY-MM-DD}?diocese={diocese}",
            "calendar": "/calendar/{year}?diocese={diocese}",
            "dioceses": "/dioceses",
            "health": "/health",
        },
        "supportedDioceses": list_dioceses(),
        "docs": "/docs",
    }


# =============================================================================
# Server Entry Point
# =============================================================================

def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
