"""
Forward-only character cursor used by the style parser.
"""

from typing import Callable

from .errors import CSSParseError, ErrorKind


class Scanner:
    """
    A cursor over a text buffer.

    The position only ever moves forward. Reading past the end of the input
    raises ``CSSParseError`` with ``ErrorKind.UNEXPECTED_EOF``.
    """

    def __init__(self, text: str):
        """
        Initialize the scanner.

        Args:
            text: The text to scan
        """
        self.text = text
        self.pos = 0

    def eof(self) -> bool:
        """Whether the whole input has been consumed."""
        return self.pos >= len(self.text)

    def next_char(self) -> str:
        """
        Peek at the next character without consuming it.

        Returns:
            str: The next character
        """
        if self.eof():
            raise CSSParseError(ErrorKind.UNEXPECTED_EOF, self.pos)
        return self.text[self.pos]

    def starts_with(self, prefix: str) -> bool:
        """Whether the remaining input starts with ``prefix``."""
        return self.text.startswith(prefix, self.pos)

    def consume_char(self) -> str:
        """
        Consume one character.

        Returns:
            str: The consumed character
        """
        char = self.next_char()
        self.pos += 1
        return char

    def consume_while(self, condition: Callable[[str], bool]) -> str:
        """
        Consume characters while ``condition`` holds or until end of input.

        Args:
            condition: Predicate applied to each upcoming character

        Returns:
            str: The consumed run (possibly empty)
        """
        start = self.pos
        while not self.eof() and condition(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def consume_whitespace(self) -> str:
        """Consume a (possibly empty) run of whitespace."""
        return self.consume_while(str.isspace)

    def expect(self, char: str, kind: ErrorKind = ErrorKind.UNEXPECTED_CHARACTER) -> str:
        """
        Consume ``char`` or fail.

        Args:
            char: The required character
            kind: Error kind to raise when a different character is found

        Returns:
            str: The consumed character
        """
        found = self.next_char()
        if found != char:
            raise CSSParseError(kind, self.pos, f"expected {char!r}, found {found!r}")
        self.pos += 1
        return found
