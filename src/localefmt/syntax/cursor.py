"""Immutable cursor infrastructure for specifier parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("08.2f", 0)
        >>> cursor.current
        '0'
        >>> cursor.advance().current
        '8'
        >>> cursor.current  # Original unchanged (immutability)
        '0'
        >>> Cursor("f", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor(",.2f", 0).expect(",").pos
            1
            >>> Cursor(",.2f", 0).expect(".") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def expect_any(self, chars: str) -> "tuple[str, Cursor] | None":
        """Consume the current character if it is one of chars.

        Returns:
            (consumed character, advanced cursor), or None if no match or at EOF

        Example:
            >>> char, cursor = Cursor("+$", 0).expect_any("+- ")
            >>> char, cursor.pos
            ('+', 1)
        """
        if not self.is_eof and self.current in chars:
            return self.current, self.advance()
        return None

    def skip_digits(self) -> "Cursor":
        """Return new cursor advanced past consecutive ASCII digits.

        Example:
            >>> Cursor("120.5", 0).skip_digits().pos
            3
        """
        c = self
        while not c.is_eof and c.current in "0123456789":
            c = c.advance()
        return c

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]
