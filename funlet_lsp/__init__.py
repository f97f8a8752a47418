"""Funlet Language Server package.

This package provides a pygls-based Language Server for the Funlet language:
diagnostics, formatting, go to definition and keyword completion.

Note: the server does not evaluate documents; every feature reads the static
analysis built by funlet.analyzer.
"""

__version__ = "0.1.0"

__all__ = [
    "server",
]
