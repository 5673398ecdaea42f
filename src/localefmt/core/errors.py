"""Exception hierarchy for localefmt.

Formatting itself never raises: malformed specifiers fall back to defaults and
unrenderable values produce the empty string. Exceptions exist only at the
configuration edge (strict specifier validation, locale construction).

Python 3.13+. Zero external dependencies.
"""

__all__ = ["LocaleFormatError", "SpecifierSyntaxError"]


class LocaleFormatError(Exception):
    """Base exception for all localefmt errors."""


class SpecifierSyntaxError(LocaleFormatError):
    """Format specifier contains characters the grammar does not accept.

    Raised only by strict validation. The lenient parser ignores the same
    characters and returns the fields it recognized.

    Attributes:
        specifier: The specifier that failed validation
        position: Offset of the first unconsumed character
    """

    def __init__(self, specifier: str, position: int) -> None:
        """Initialize SpecifierSyntaxError.

        Args:
            specifier: The specifier that failed validation
            position: Offset of the first unconsumed character
        """
        self.specifier = specifier
        self.position = position
        super().__init__(
            f"Invalid format specifier {specifier!r}: "
            f"unexpected {specifier[position:]!r} at position {position}"
        )
