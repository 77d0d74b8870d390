"""
Allergens router for the user's allergen settings.

This router provides:
- GET /allergens - All allergens with labels and the user's selection
- POST /allergens/toggle - Turn one allergen on or off
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_catalog, unknown_allergen
from api.schemas import AllergenOut, AllergensView, ToggleAllergenInput
from catalog.errors import UnknownAllergenError
from catalog.events import log_allergen_toggled
from catalog.state import RecipeCatalogState

router = APIRouter(prefix="/allergens", tags=["allergens"])


def _allergens_view(state: RecipeCatalogState) -> AllergensView:
    selected = state.user_allergens()
    return AllergensView(
        allergens=[
            AllergenOut(value=a.value, label=a.label, selected=a in selected)
            for a in state.list_allergens()
        ],
        user_allergens=[a.value for a in selected],
    )


@router.get(
    "",
    response_model=AllergensView,
    summary="List allergens and the user's selection",
)
def list_allergens(state: RecipeCatalogState = Depends(get_catalog)) -> AllergensView:
    return _allergens_view(state)


@router.post(
    "/toggle",
    response_model=AllergensView,
    summary="Toggle an allergen",
    description="Select (enabled=true) or deselect (enabled=false) an allergen. Both directions "
                "are idempotent. Affects which recipes GET /recipes/filtered returns.",
)
def toggle_allergen(
    body: ToggleAllergenInput,
    state: RecipeCatalogState = Depends(get_catalog),
) -> AllergensView:
    """
    Toggle an allergen on or off.

    Args:
        body: ToggleAllergenInput with the allergen value and target state

    Returns:
        AllergensView after the change

    Raises:
        HTTPException 400: If the allergen value is unknown

    Example:
        ```bash
        POST /allergens/toggle
        Body: {"allergen": "treeNuts", "enabled": true}
        ```
    """
    try:
        changed = state.toggle_allergen(body.allergen, body.enabled)
    except UnknownAllergenError as e:
        raise unknown_allergen(e) from e

    view = _allergens_view(state)
    if changed:
        log_allergen_toggled(body.allergen, body.enabled, len(view.user_allergens))
    return view
