"""Core utilities shared across syntax and runtime layers.

This package provides foundational pieces that both the syntax layer
(specifier parsing) and runtime layer (rendering, locales) depend on.
By isolating them here, we maintain a clean dependency graph:

    core <- syntax <- runtime

Exports:
    LocaleFormatError: Base exception for all localefmt errors
    SpecifierSyntaxError: Raised by strict specifier validation
    BabelImportError: Raised when Babel-backed features run without Babel

Python 3.13+.
"""

from .babel_compat import BabelImportError
from .errors import LocaleFormatError, SpecifierSyntaxError

__all__ = ["BabelImportError", "LocaleFormatError", "SpecifierSyntaxError"]
