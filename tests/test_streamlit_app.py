"""
Script-level tests for the Streamlit frontend.

The app runs under streamlit.testing's AppTest with requests.request patched
to a small in-memory backend, so the tabs render exactly as they would
against the API.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple
from unittest.mock import patch

import pytest
import requests
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "streamlit_app" / "app.py")

RECIPE = {
    "id": "abc",
    "name": "Spaghetti Carbonara",
    "ingredients": ["Pasta", "Eggs", "Bacon"],
    "instructions": ["Cook pasta.", "Mix with eggs."],
    "is_favorite": True,
}


class FakeResponse:
    def __init__(self, payload: Dict[str, Any], status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def json(self) -> Dict[str, Any]:
        return self.payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)


class FakeBackend:
    """Answers the app's API calls and records them."""

    def __init__(self, toggle_fails: bool = False):
        self.toggle_fails = toggle_fails
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        path = "/" + url.split("://", 1)[-1].split("/", 1)[-1]
        self.calls.append((method, path))

        if path == "/health":
            return FakeResponse({
                "status": "ok",
                "catalog": {"recipes_total": 1, "recipes_visible": 1, "favorites_total": 1, "user_allergens": []},
            })
        if path == "/recipes/filtered":
            return FakeResponse({"results": [RECIPE], "total": 1})
        if path == f"/recipes/{RECIPE['id']}":
            return FakeResponse(RECIPE)
        if path == "/favorites":
            return FakeResponse({"items": [RECIPE], "total": 1, "changed": False})
        if path == "/allergens":
            return FakeResponse({
                "allergens": [{"value": "eggs", "label": "Eggs", "selected": False}],
                "user_allergens": [],
            })
        if path == "/allergens/toggle" and self.toggle_fails:
            return FakeResponse({"detail": "Backend error"}, status_code=500)
        return FakeResponse({"detail": f"Unexpected {method} {path}"}, status_code=404)


def _markdown(at: AppTest) -> List[str]:
    return [m.value for m in at.markdown]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def app(backend):
    with patch("requests.request", side_effect=backend):
        at = AppTest.from_file(APP_PATH, default_timeout=30)
        at.run()
        yield at


class TestTabs:
    """Test cases for the rendered tabs."""

    def test_renders_without_exceptions(self, app):
        assert not app.exception

    def test_favorites_details_match_recipe_details(self, app):
        """Test that favorites show the same ingredient and instruction blocks as the detail view."""
        markdown = _markdown(app)

        assert "**Ingredients:**" in markdown
        assert "**Cooking Instructions:**" in markdown
        assert "- Pasta\n- Eggs\n- Bacon" in markdown
        assert app.button(key="favorites_remove_abc").label == "Remove from favorites"

    def test_details_button_fetches_recipe(self, app, backend):
        """Test that opening the detail view goes through GET /recipes/{id}."""
        assert ("GET", "/recipes/abc") not in backend.calls

        app.button(key="row_details_abc").click().run()

        assert ("GET", "/recipes/abc") in backend.calls
        assert app.button(key="recipes_detail_fav_abc") is not None
        assert not app.exception


def test_failed_allergen_toggle_reverts_widget():
    """Test that the toggle shows the backend's selection when the update fails."""
    backend = FakeBackend(toggle_fails=True)
    with patch("requests.request", side_effect=backend):
        at = AppTest.from_file(APP_PATH, default_timeout=30)
        at.run()

        at.toggle(key="allergen_eggs").set_value(True).run()

        assert ("POST", "/allergens/toggle") in backend.calls
        assert at.toggle(key="allergen_eggs").value is False
