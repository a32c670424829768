"""Immutable cursor infrastructure for line scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - The tokenizer scans one physical line at a time, so a cursor knows
      its line number up front instead of computing it from an offset

Line Ending Support:
    - LF (Unix, \\n): the tokenizer splits on it
    - CRLF (Windows, \\r\\n): the trailing \\r is ordinary whitespace
"""

from dataclasses import dataclass

__all__ = ["INLINE_WHITESPACE", "Cursor", "ParseResult"]

# Whitespace inside a line. Newlines never reach a cursor.
INLINE_WHITESPACE: frozenset[str] = frozenset(" \t\r\f\v")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position within one source line.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per scan step)
        3. Simple position - Just an integer offset into the line
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor('msgid "a"', 0, line=3)
        >>> cursor.current
        'm'
        >>> cursor.advance(5).current
        ' '
        >>> cursor.line
        3
    """

    source: str
    pos: int
    line: int = 1

    @property
    def is_eof(self) -> bool:
        """Check if at end of the line.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of line {self.line} at position {self.pos}"
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
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor2 = cursor.advance()
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos
            1
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos, self.line)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Args:
            end_pos: End position (exclusive)

        Returns:
            Source substring from current position to end_pos
        """
        return self.source[self.pos : end_pos]

    def rest(self) -> str:
        """Remainder of the line from the current position."""
        return self.source[self.pos :]

    def startswith(self, prefix: str) -> bool:
        """Check whether the remainder of the line starts with prefix.

        Example:
            >>> Cursor("msgstr[0]", 0).startswith("msgstr[")
            True
        """
        return self.source.startswith(prefix, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip inline whitespace (space, tab, CR, form feed, vertical tab).

        Returns:
            New cursor advanced past all consecutive whitespace characters

        Example:
            >>> cursor = Cursor(' \\t msgid', 0)
            >>> cursor.skip_whitespace().pos
            3
        """
        c = self
        while not c.is_eof and c.current in INLINE_WHITESPACE:
            c = c.advance()
        return c

    def at_whitespace_or_eof(self) -> bool:
        """True when the cursor sits on whitespace or at the end of the line."""
        return self.is_eof or self.current in INLINE_WHITESPACE

    def next_word(self) -> str:
        """Return the whitespace-delimited word starting at the cursor.

        Example:
            >>> Cursor("foo bar", 0).next_word()
            'foo'
        """
        c = self
        while not c.at_whitespace_or_eof():
            c = c.advance()
        return self.slice_to(c.pos)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing the scanned value and new cursor position.

    Type Parameters:
        T: The type of the scanned value

    Pattern:
        Every scanner has signature:
            def scan_foo(cursor: Cursor) -> ParseResult[Foo] | Err:
                ...
                return ParseResult(scanned_value, new_cursor)

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult('h', cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
