"""
Command Line Interface for typetags.
"""

from typetags.cli.app import app as cli_app

__all__ = ["cli_app"]
