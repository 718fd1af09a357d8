"""Exceptions raised by the markup pipeline.

Every failure is fatal: the first violation aborts tokenizing, parsing and
rendering, and the caller receives no HTML.
"""

from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Token


class ErrorKind(Enum):
    """Classification of pipeline failures."""
    # Lexical
    UNRECOGNIZED_CHARACTER = auto()
    UNTERMINATED_STRING = auto()

    # Structural - naming
    UNNAMED_ELEMENT = auto()

    # Structural - attributes
    DUPLICATE_EQUALS = auto()
    ATTRIBUTE_NAME_REQUIRED = auto()
    EQUALS_REQUIRED = auto()
    INCOMPLETE_ATTRIBUTE = auto()

    # Structural - nesting
    INVALID_POSITION = auto()
    UNTERMINATED_BLOCK = auto()


class MarkupError(Exception):
    """Base class for all markup pipeline failures."""
    def __init__(self, message: str, kind: ErrorKind):
        self.message = message
        self.kind = kind
        super().__init__(message)


class LexerError(MarkupError):
    """Exception raised for lexical analysis errors."""
    def __init__(self, message: str, kind: ErrorKind, line: int, column: int,
                 character: Optional[str] = None):
        self.line = line
        self.column = column
        self.character = character
        super().__init__(message, kind)
        self.args = (f"{message} at line {line}, column {column}",)


class ParseError(MarkupError):
    """Exception raised for grammar violations in the token sequence."""
    def __init__(self, message: str, kind: ErrorKind, token: Optional['Token'] = None):
        self.token = token
        super().__init__(message, kind)
        if token is None:
            self.args = (f"{message} at end of input",)
