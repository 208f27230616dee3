"""bbmark - A parser for nested bracket tag markup.

bbmark turns text annotated with BBCode-style tags into a tree of typed
nodes. Tags have the forms ``[name]``, ``[name=value]`` and
``[name="quoted value"]``, are closed by a matching ``[/name]``, and nest
arbitrarily.

What a tag means is up to the caller: bbmark does not render, coerce
values, or validate tag names. It only guarantees that a returned tree is
well formed.

Requirements
------------
- Python 3.10+

Examples
--------
Basic usage:

    >>> from bbmark import parse
    >>> parse('ssf[xx="123"]aaa[/xx]')
    [Text(content='ssf'), Block(tag='xx', value='123', children=[Text(content='aaa')])]

Handling errors:

    >>> from bbmark import MarkupSyntaxError
    >>> try:
    ...     parse('[xx="123]')
    ... except MarkupSyntaxError as e:
    ...     print(e.describe())

See Also
--------
bbmark.ast : AST node definitions and utilities

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "bbmark requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from bbmark.api import parse
from bbmark.ast import Block, EndOfInput, Node, NodeVisitor, SourceLocation, Text
from bbmark.exceptions import (
    BBMarkError,
    InvalidOptionsError,
    MarkupSyntaxError,
    NestingDepthError,
    ParsingError,
    RuleFrame,
    ValidationError,
)
from bbmark.options import MarkupParserOptions
from bbmark.parsers import MarkupParser

__all__ = [
    "BBMarkError",
    "Block",
    "EndOfInput",
    "InvalidOptionsError",
    "MarkupParser",
    "MarkupParserOptions",
    "MarkupSyntaxError",
    "NestingDepthError",
    "Node",
    "NodeVisitor",
    "ParsingError",
    "RuleFrame",
    "SourceLocation",
    "Text",
    "ValidationError",
    "__version__",
    "parse",
]
