"""Tests for datef package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_datef() -> None:
    """Import datef package succeeds."""
    import datef

    assert hasattr(datef, "__version__")
    assert datef.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import datef.core submodule succeeds."""
    from datef import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import datef.units submodule succeeds."""
    from datef import units

    assert hasattr(units, "__all__")


def test_import_layout_module() -> None:
    """Import datef.layout submodule succeeds."""
    from datef import layout

    assert "format_layout" in layout.__all__
    assert "parse_layout" in layout.__all__


def test_public_names_resolve() -> None:
    """Every name in datef.__all__ is an attribute of the package."""
    import datef

    for name in datef.__all__:
        assert hasattr(datef, name), name


def test_cli_importable() -> None:
    """The command-line module exposes its entry point."""
    from datef import cli

    assert callable(cli.run)
    assert callable(cli.main)
