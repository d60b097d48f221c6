"""Command-line interface for typewright."""

from typewright.cli.parser import create_parser

__all__ = ["create_parser"]
