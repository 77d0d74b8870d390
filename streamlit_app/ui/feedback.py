"""
Standardized feedback utilities for consistent error and empty states.

Provides reusable components for displaying errors and empty states across
all tabs in a consistent manner.
"""

from typing import Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_backend_offline() -> None:
    """Display the standard 'backend unreachable' error."""
    show_error(
        "The recipe service is not reachable.",
        hint="Start it with `uvicorn api.main:app --reload` or check BACKEND_URL.",
    )


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)
