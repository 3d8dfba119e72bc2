"""
stackasm Command-Line Interface
===============================

This package provides the command-line tools of stackasm:

- **smasm**: stack machine assembler

Each tool is a Click-based CLI application.
"""

__all__ = ["smasm"]
