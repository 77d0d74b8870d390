"""
FastAPI application for the Recipe Allergen Catalog API.

This module builds the REST API around a single RecipeCatalogState:
- GET /recipes: Full catalog
- GET /recipes/filtered: Catalog filtered by the user's allergens
- GET /recipes/{recipe_id}: One recipe
- GET /favorites, POST /favorites/add, POST /favorites/remove: Favorites
- GET /allergens, POST /allergens/toggle: Allergen settings
- GET /health: Health check

One state manager is created per app in create_app() and kept on app.state
for the lifetime of the process. Tests build their own app (and state) the same way.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
from api.config import AppConfig, configure_logging

import logging
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI

from api.routers import allergens, favorites, recipes
from catalog.state import RecipeCatalogState

API_NAME = "Recipe Allergen Catalog API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Browse a recipe catalog, hide recipes containing your allergens, and keep a favorites list"

logger = logging.getLogger(__name__)


def create_app(state: Optional[RecipeCatalogState] = None) -> FastAPI:
    """
    Build the FastAPI app and the catalog state it owns.

    Args:
        state: Catalog state to serve. Defaults to a new state seeded with the sample recipes.

    Returns:
        Configured FastAPI app with state on app.state.catalog
    """
    app = FastAPI(
        title=API_NAME,
        description=API_DESCRIPTION,
        version=API_VERSION,
        openapi_tags=[
            {
                "name": "recipes",
                "description": "Browse the recipe catalog, optionally filtered by the user's allergens.",
            },
            {
                "name": "favorites",
                "description": "Manage the user's ordered list of favorite recipes.",
            },
            {
                "name": "allergens",
                "description": "Select the allergens the user wants to avoid.",
            },
            {
                "name": "health",
                "description": "Health check and monitoring endpoints.",
            },
        ],
    )
    app.state.catalog = state if state is not None else RecipeCatalogState()
    app.state.started_at = time.time()

    app.include_router(recipes.router)
    app.include_router(favorites.router)
    app.include_router(allergens.router)

    @app.get("/health", tags=["health"])
    def health() -> Dict[str, Any]:
        """
        Health check endpoint for monitoring and status checks.

        Returns:
            Dictionary with status, API metadata, uptime and a snapshot of the catalog state.
            Always returns 200 OK if the endpoint is reachable.
        """
        return {
            "status": "ok",
            "name": API_NAME,
            "version": API_VERSION,
            "uptime_seconds": int(time.time() - app.state.started_at),
            "event_log_enabled": AppConfig.get_event_log_path() is not None,
            "catalog": app.state.catalog.stats(),
        }

    @app.get("/")
    def root() -> Dict[str, str]:
        """
        Root endpoint providing API information.

        Returns:
            Dictionary with API name and version
        """
        return {
            "name": API_NAME,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
            "docs": "/docs",
        }

    logger.info("%s %s ready", API_NAME, API_VERSION)
    return app


configure_logging()
app = create_app()
