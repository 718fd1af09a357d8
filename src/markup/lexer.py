from dataclasses import dataclass
from enum import Enum, auto
from typing import Generator, List, Optional
import unicodedata

from common.base.logging_config import get_logger
from .errors import ErrorKind, LexerError

logger = get_logger(__name__)

class TokenType(Enum):
    """Token types for the markup language."""
    OPEN_PAREN = auto()     # (
    CLOSE_PAREN = auto()    # )
    OPEN_BRACKET = auto()   # {
    CLOSE_BRACKET = auto()  # }
    EQUALS = auto()         # =

    STRING_LITERAL = auto() # "text", quotes stripped
    IDENTIFIER = auto()     # tag or attribute name

@dataclass(frozen=True)
class Token:
    """A lexical token. Order in the sequence is its only structure."""
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

SINGLETON_TOKENS = {
    '{': TokenType.OPEN_BRACKET,
    '}': TokenType.CLOSE_BRACKET,
    '(': TokenType.OPEN_PAREN,
    ')': TokenType.CLOSE_PAREN,
    '=': TokenType.EQUALS,
}

SEPARATORS = frozenset(' \n')

# Combining marks (e.g. Devanagari vowel signs) may continue an identifier but not start one
CONTINUING_CATEGORIES = frozenset({'Mn', 'Mc'})

def is_identifier_char(char: str, continuing: bool) -> bool:
    """Whether char belongs in an identifier, approximating the Unicode Alphabetic property."""
    if char.isalpha():
        return True
    category = unicodedata.category(char)
    return category == 'Nl' or (continuing and category in CONTINUING_CATEGORIES)

class _Pending(Enum):
    """What the lexer is in the middle of accumulating."""
    NONE = auto()
    IDENTIFIER = auto()
    STRING_LITERAL = auto()

class MarkupLexer:
    """
    Single-pass lexical analyzer for the markup language.

    Keeps one pending token (identifier or string literal) and emits it when a
    terminator is reached. Line and column are tracked only for error reports.
    """

    def __init__(self):
        self.init("")

    def init(self, text: str) -> None:
        self.text = text
        self.line = 1
        self.column = 1
        self.pending = _Pending.NONE
        self.buffer: List[str] = []
        self.string_line = 0
        self.string_column = 0

    def _advance(self, char: str) -> None:
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

    def _flush(self) -> Optional[Token]:
        """Close the pending identifier, if any."""
        if self.pending != _Pending.IDENTIFIER:
            return None
        token = Token(TokenType.IDENTIFIER, "".join(self.buffer))
        self.pending = _Pending.NONE
        self.buffer = []
        return token

    def tokenize(self, text: str) -> Generator[Token, None, None]:
        self.init(text)
        for char in text:
            if self.pending == _Pending.STRING_LITERAL:
                if char == '"':
                    yield Token(TokenType.STRING_LITERAL, "".join(self.buffer))
                    self.pending = _Pending.NONE
                    self.buffer = []
                else:
                    self.buffer.append(char)
                self._advance(char)
                continue

            if is_identifier_char(char, self.pending == _Pending.IDENTIFIER):
                self.pending = _Pending.IDENTIFIER
                self.buffer.append(char)
            elif char in SEPARATORS or char in SINGLETON_TOKENS:
                if token := self._flush():
                    yield token
                if char in SINGLETON_TOKENS:
                    yield Token(SINGLETON_TOKENS[char], char)
            elif char == '"':
                if token := self._flush():
                    yield token
                self.pending = _Pending.STRING_LITERAL
                self.string_line, self.string_column = self.line, self.column
            else:
                raise LexerError(f"Unrecognized character {char!r}",
                                 ErrorKind.UNRECOGNIZED_CHARACTER,
                                 self.line, self.column, character=char)
            self._advance(char)

        if self.pending == _Pending.STRING_LITERAL:
            raise LexerError("Unterminated string literal",
                             ErrorKind.UNTERMINATED_STRING,
                             self.string_line, self.string_column, character='"')
        if token := self._flush():
            yield token

def tokenize(text: str) -> List[Token]:
    lexer = MarkupLexer()
    tokens = list(lexer.tokenize(text))
    logger.debug(f"Tokenized {len(text)} characters into {len(tokens)} tokens")
    return tokens
