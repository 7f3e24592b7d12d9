"""Command dispatcher: maps CLI subcommands onto TaskStore operations."""

from .app import app, main

__all__ = ["app", "main"]
