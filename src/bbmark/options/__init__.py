"""Option dataclasses for the bbmark parsers."""

from bbmark.options.base import BaseParserOptions, CloneFrozenMixin
from bbmark.options.markup import MarkupParserOptions

__all__ = [
    "BaseParserOptions",
    "CloneFrozenMixin",
    "MarkupParserOptions",
]
