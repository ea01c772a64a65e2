"""Command-line interface for cabinetplan."""

from cabinetplan.cli.main import app

__all__ = ["app"]
