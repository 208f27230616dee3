"""Parsers that turn tag markup into AST nodes."""

from bbmark.parsers.base import BaseParser
from bbmark.parsers.grammar import MarkupGrammar
from bbmark.parsers.markup import MarkupParser

__all__ = [
    "BaseParser",
    "MarkupGrammar",
    "MarkupParser",
]
