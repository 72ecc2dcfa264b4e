"""Core utilities shared by the analysis and summary layers.

Exports:
    BabelImportError: Raised when a Babel-backed feature is used without Babel
    is_babel_available: Check for the optional Babel dependency

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available

__all__ = ["BabelImportError", "is_babel_available"]
