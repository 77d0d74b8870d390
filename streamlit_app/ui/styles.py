"""
Global CSS Styling for the Recipe Allergen Catalog.

This module provides load_global_styles() to inject consistent styling
across all tabs.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Rounds buttons into pills
    - Styles recipe rows and ingredient pills
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .stButton > button {
            border-radius: 50px !important;
            font-weight: 600 !important;
        }

        .main .block-container {
            max-width: 960px !important;
            padding-top: 1.5rem !important;
        }

        .recipe-ingredient {
            display: inline-block;
            background-color: #fef2f2;
            border-radius: 999px;
            padding: 2px 8px;
            margin: 0 4px 4px 0;
            font-size: 0.8rem;
            color: #1f2933;
            white-space: nowrap;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)


def ingredient_pills(ingredients) -> str:
    """Render ingredient names as inline HTML pills."""
    return " ".join(f"<span class='recipe-ingredient'>{i}</span>" for i in ingredients)
