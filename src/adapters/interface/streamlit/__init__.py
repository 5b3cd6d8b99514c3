"""Streamlit interface adapter package."""

__all__ = []
