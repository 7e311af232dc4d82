"""Command-line interface for flaskgen."""

from flaskgen.cli.app import app

__all__ = ["app"]
