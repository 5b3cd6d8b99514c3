"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module


def test_interface_packages_export_nothing() -> None:
    for name in ("src.adapters.interface", "src.adapters.interface.streamlit"):
        assert import_module(name).__all__ == []


def test_breakdown_chart_is_importable_without_streamlit_runtime() -> None:
    module = import_module("src.adapters.interface.streamlit.breakdown_chart")
    assert "to_chart_slices" in module.__all__
