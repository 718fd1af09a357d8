"""Parser for the markup language.

Builds a forest of Elements from the token sequence produced by the lexer,
with one token of lookahead (LL(1)):

    forest           := element*
    element          := IDENT paren_attrs? bracket_children?
    paren_attrs      := '(' (IDENT '=' STRING)* ')'
    bracket_children := '{' forest '}'

Malformed input raises ParseError; there is no recovery.
"""

from typing import Dict, Iterable, List, Optional

from common.base.logging_config import get_logger
from .errors import ErrorKind, ParseError
from .lexer import Token, TokenType

logger = get_logger(__name__)

class Element:
    """One node of the markup tree."""
    def __init__(self, tag: str, attributes: Optional[Dict[str, str]] = None,
                 children: Optional[List['Element']] = None):
        self.tag = tag
        self.attributes = attributes if attributes is not None else {}
        self.children = children if children is not None else []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        # Iterative: nesting depth is unbounded
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if (left.tag != right.tag
                    or left.attributes != right.attributes
                    or len(left.children) != len(right.children)):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, {self.attributes!r}, {self.children!r})"

class MarkupParser:
    """LL(1) parser producing a forest of Elements.

    Open children blocks are kept on an explicit stack rather than the call
    stack, so nesting depth is bounded only by memory.
    """

    def __init__(self, tokens: Iterable[Token]):
        """Initialize parser with token stream."""
        self.tokens = list(tokens)
        self.position = 0

    def peek(self) -> Optional[Token]:
        """Look at the next token without consuming it."""
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def consume(self) -> Optional[Token]:
        """Consume and return next token."""
        token = self.peek()
        if token:
            self.position += 1
        return token

    def parse(self) -> List[Element]:
        """
        Parse the whole token sequence as a top-level forest.

        Each '{' pushes the enclosing sibling list and makes the new element's
        children the current one; the matching '}' pops it back.

        :return: Root elements in source order
        """
        forest: List[Element] = []
        siblings = forest
        open_blocks: List[List[Element]] = []

        while token := self.peek():
            if token.type == TokenType.IDENTIFIER:
                element = self.parse_element()
                siblings.append(element)
                next_token = self.peek()
                if next_token and next_token.type == TokenType.OPEN_BRACKET:
                    self.consume()
                    open_blocks.append(siblings)
                    siblings = element.children
            elif token.type == TokenType.CLOSE_BRACKET and open_blocks:
                self.consume()
                siblings = open_blocks.pop()
            elif token.type in {TokenType.CLOSE_BRACKET, TokenType.CLOSE_PAREN}:
                raise ParseError(f"'{token.value}' in invalid position",
                                 ErrorKind.INVALID_POSITION, token)
            else:
                raise ParseError("Cannot have unnamed elements",
                                 ErrorKind.UNNAMED_ELEMENT, token)

        if open_blocks:
            raise ParseError("Children block opened with '{' was never closed",
                             ErrorKind.UNTERMINATED_BLOCK)
        return forest

    def parse_element(self) -> Element:
        """Parse an element's tag and optional attribute list; its children block is left to parse()."""
        element = Element(tag=self.consume().value)

        token = self.peek()
        if token and token.type == TokenType.OPEN_PAREN:
            self.consume()
            self.parse_attributes(element)

        return element

    def parse_attributes(self, element: Element) -> None:
        """
        Parse `name="value"` entries up to and including the closing ')'.

        A repeated name overwrites the earlier value.
        """
        attribute_name: Optional[str] = None
        has_seen_equals = False

        while token := self.consume():
            if token.type == TokenType.IDENTIFIER:
                attribute_name = token.value
            elif token.type == TokenType.EQUALS:
                if has_seen_equals:
                    raise ParseError("Only one equals permitted",
                                     ErrorKind.DUPLICATE_EQUALS, token)
                if attribute_name is None:
                    raise ParseError("Attribute name should be specified",
                                     ErrorKind.ATTRIBUTE_NAME_REQUIRED, token)
                has_seen_equals = True
            elif token.type == TokenType.STRING_LITERAL:
                if attribute_name is None:
                    raise ParseError("Attribute name should be specified",
                                     ErrorKind.ATTRIBUTE_NAME_REQUIRED, token)
                if not has_seen_equals:
                    raise ParseError("Equal sign needed between attribute name and value",
                                     ErrorKind.EQUALS_REQUIRED, token)
                if attribute_name in element.attributes:
                    logger.debug(f"Attribute '{attribute_name}' on <{element.tag}> overwritten")
                element.attributes[attribute_name] = token.value
                attribute_name = None
                has_seen_equals = False
            elif token.type == TokenType.CLOSE_PAREN:
                if attribute_name is not None or has_seen_equals:
                    raise ParseError(f"Attribute '{attribute_name}' has no value",
                                     ErrorKind.INCOMPLETE_ATTRIBUTE, token)
                return
            else:
                raise ParseError(f"'{token.value}' in invalid position",
                                 ErrorKind.INVALID_POSITION, token)

        raise ParseError("Attribute list opened with '(' was never closed",
                         ErrorKind.UNTERMINATED_BLOCK)


def parse(tokens: Iterable[Token]) -> List[Element]:
    """
    Parse a token stream into a forest of Elements.
    Provides main entry point for parsing markup content.
    """
    parser = MarkupParser(tokens)
    forest = parser.parse()
    logger.debug(f"Parsed {len(parser.tokens)} tokens into {len(forest)} root elements")
    return forest


def display_tree(forest: List[Element], indent: int = 0) -> str:
    """
    Return a text representation of a forest, one element per line.

    :param forest: Elements to display
    :param indent: Indentation level of the root elements
    :return: Indented dump, e.g. ``div (class='flex')``
    """
    parts = []
    pending = [(element, indent) for element in reversed(forest)]
    while pending:
        element, level = pending.pop()
        line = f"{'  ' * level}{element.tag}"
        if element.attributes:
            pairs = ", ".join(f"{name}={value!r}" for name, value in element.attributes.items())
            line += f" ({pairs})"
        parts.append(line)
        pending.extend((child, level + 1) for child in reversed(element.children))
    return "\n".join(parts)
