"""Command-line interface for netrose-scaffold."""

from netrose_scaffold.cli.app import app

__all__ = ["app"]
