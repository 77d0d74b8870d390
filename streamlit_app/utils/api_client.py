"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls to the FastAPI backend go through functions in this module.

Key principles:
- Centralized error handling for network issues
- Consistent timeout handling (API_TIMEOUT_SECONDS)
- Graceful degradation when backend is unavailable
- Never let exceptions bubble up to crash the Streamlit app

Every function returns parsed JSON (dict) on success or None on error. Errors
are logged and shown to the user with st.warning / st.error.
"""

import logging
from typing import Any, Dict, Optional

import requests
import streamlit as st

from api.config import AppConfig

logger = logging.getLogger(__name__)


def get_backend_url() -> str:
    """
    Get the backend API base URL.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000.
    """
    return AppConfig.get_backend_url()


def _error_detail(exc: requests.exceptions.RequestException) -> str:
    """Prefer the API's `detail` message over the raw exception text."""
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = None
        if detail:
            return str(detail)
    return str(exc)


def _request(method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
    response = requests.request(
        method,
        f"{get_backend_url()}{path}",
        timeout=AppConfig.get_api_timeout(),
        **kwargs,
    )
    response.raise_for_status()
    return response.json()


def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        The /health response if status == "ok", otherwise None.
        Never shows an error: the sidebar renders an offline badge instead.
    """
    try:
        data = _request("GET", "/health")
    except requests.exceptions.RequestException as e:
        logger.debug("Health check failed: %s", e)
        return None
    return data if data.get("status") == "ok" else None


def filter_recipes() -> Optional[Dict[str, Any]]:
    """
    Fetch the catalog filtered by the user's allergens.

    Returns:
        Dictionary with "results" and "total", or None on error.
    """
    try:
        return _request("GET", "/recipes/filtered")
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to load filtered recipes: %s", e)
        st.error(f"Failed to load recipes: {_error_detail(e)}")
        return None


def get_recipe(recipe_id: str) -> Optional[Dict[str, Any]]:
    """
    Fetch one recipe for the detail view.

    Args:
        recipe_id: Recipe identifier

    Returns:
        Recipe dictionary, or None on error (including unknown ids).
    """
    try:
        return _request("GET", f"/recipes/{recipe_id}")
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to load recipe %s: %s", recipe_id, e)
        st.warning(f"Could not load recipe: {_error_detail(e)}")
        return None


def list_favorites() -> Optional[Dict[str, Any]]:
    """
    Fetch the favorites.

    Returns:
        FavoritesView dictionary with "items", "total" and "changed", or None on error.
    """
    try:
        return _request("GET", "/favorites")
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to load favorites: %s", e)
        st.warning(f"Could not fetch favorites: {_error_detail(e)}")
        return None


def add_favorite(recipe_id: str) -> Optional[Dict[str, Any]]:
    """
    Add a recipe to the favorites via POST /favorites/add.

    Returns:
        Updated FavoritesView dictionary, or None on error.
    """
    try:
        return _request("POST", "/favorites/add", params={"recipe_id": recipe_id})
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to add favorite %s: %s", recipe_id, e)
        st.error(f"Failed to add favorite: {_error_detail(e)}")
        return None


def remove_favorite(recipe_id: str) -> Optional[Dict[str, Any]]:
    """
    Remove a recipe from the favorites via POST /favorites/remove.

    Returns:
        Updated FavoritesView dictionary, or None on error.
    """
    try:
        return _request("POST", "/favorites/remove", params={"recipe_id": recipe_id})
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to remove favorite %s: %s", recipe_id, e)
        st.error(f"Failed to remove favorite: {_error_detail(e)}")
        return None


def get_allergens() -> Optional[Dict[str, Any]]:
    """
    Fetch all allergens with the user's selection.

    Returns:
        AllergensView dictionary with "allergens" and "user_allergens", or None on error.
    """
    try:
        return _request("GET", "/allergens")
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to load allergens: %s", e)
        st.warning(f"Could not fetch allergens: {_error_detail(e)}")
        return None


def toggle_allergen(allergen: str, enabled: bool) -> Optional[Dict[str, Any]]:
    """
    Turn an allergen on or off via POST /allergens/toggle.

    Args:
        allergen: Raw allergen value (e.g. "eggs", "treeNuts")
        enabled: Target state

    Returns:
        Updated AllergensView dictionary, or None on error.
    """
    try:
        return _request("POST", "/allergens/toggle", json={"allergen": allergen, "enabled": enabled})
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to toggle allergen %s: %s", allergen, e)
        st.error(f"Failed to update allergen: {_error_detail(e)}")
        return None
