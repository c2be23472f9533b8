"""
CLI module for Nanny.

Provides the command-line interface using Click.
"""

from nanny.cli.main import cli, main

__all__ = ["main", "cli"]
