"""Markup - translates element markup text into indented HTML."""

from typing import Optional

from common.config.render_config import RenderConfig, get_render_config
from .errors import ErrorKind, MarkupError, LexerError, ParseError
from .lexer import tokenize
from .parser import Element, parse
from .html_generator import render

def markup_text_to_html(text: str, config: Optional[RenderConfig] = None) -> str:
    """Main entry point: tokenize, parse and render markup text at depth 0."""
    tokens = tokenize(text)
    forest = parse(tokens)
    return render(forest, 0, config or get_render_config())

__all__ = [
    'tokenize', 'parse', 'render', 'markup_text_to_html',
    'Element', 'ErrorKind', 'MarkupError', 'LexerError', 'ParseError',
]
