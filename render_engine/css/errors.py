"""
Error types raised by the style parser and the layout engine.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Reasons a stylesheet or a layout computation is rejected."""
    UNEXPECTED_CHARACTER = "unexpected character"
    UNEXPECTED_EOF = "unexpected end of input"
    UNTERMINATED_STRING = "unterminated string"
    INVALID_COLOR_LENGTH = "invalid color length"
    UNKNOWN_UNIT = "unknown unit"
    UNSUPPORTED_COMBINATOR = "unsupported combinator"
    EMPTY_SELECTOR = "empty selector"
    EMPTY_IDENTIFIER = "empty identifier"
    INVALID_DIMENSION = "invalid dimension"


class RenderEngineError(Exception):
    """Base class for every error raised by the render engine."""


class CSSParseError(RenderEngineError):
    """
    A structural violation in style text.

    The parse is abandoned when this is raised; no partial rule list exists.
    """

    def __init__(self, kind: ErrorKind, position: int, detail: Optional[str] = None):
        """
        Initialize the error.

        Args:
            kind: What went wrong
            position: Character offset into the style text
            detail: Optional human readable detail
        """
        self.kind = kind
        self.position = position
        self.detail = detail

        message = f"{kind.value} at offset {position}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class LayoutError(RenderEngineError):
    """An explicit dimension that cannot be converted to pixels."""

    def __init__(self, kind: ErrorKind, property_name: str, value: Any):
        """
        Initialize the error.

        Args:
            kind: What went wrong
            property_name: The declaration being resolved (``width`` or ``height``)
            value: The offending declared value
        """
        self.kind = kind
        self.property_name = property_name
        self.value = value
        super().__init__(f"{kind.value} for {property_name}: {value!r}")
