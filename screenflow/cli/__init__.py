"""ScreenFlow command line interface."""

from screenflow.cli.main import app, main

__all__ = ["app", "main"]
