"""Command-line interface for vuescaffold."""

from vuescaffold.cli.app import app

__all__ = ["app"]
