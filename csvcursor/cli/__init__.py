"""
CLI for csvcursor.

Command-line interface for inspecting CSV files field by field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from csvcursor.cli.context import CliContext, ExitCode

if TYPE_CHECKING:
    from typer import Typer

    app: Typer


def __getattr__(name: str) -> Any:
    if name == "app":
        from csvcursor.cli.main import app as _app

        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CliContext",
    "ExitCode",
    "app",
]
