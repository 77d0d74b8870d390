"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend API communication
- recipe_view: Formatting helpers for recipe rows and detail views
- session: Session state for the detail view and allergen toggles
"""
