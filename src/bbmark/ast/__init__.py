#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed tag markup.

The module consists of several components:

- nodes: node classes for text runs, tag blocks and the end-of-input sentinel
- visitors: visitor pattern base class and a tree validator
- utils: text extraction and traversal helpers

Examples
--------
    >>> from bbmark.ast import Block, Text
    >>> Block(tag="b", children=[Text(content="bold")])
    Block(tag='b', value=None, children=[Text(content='bold')])

"""

from __future__ import annotations

from bbmark.ast.nodes import (
    Block,
    Element,
    EndOfInput,
    Node,
    SourceLocation,
    Text,
    get_node_children,
)
from bbmark.ast.utils import extract_text, max_depth, walk
from bbmark.ast.visitors import NodeVisitor, ValidationVisitor

__all__ = [
    "Block",
    "Element",
    "EndOfInput",
    "Node",
    "NodeVisitor",
    "SourceLocation",
    "Text",
    "ValidationVisitor",
    "extract_text",
    "get_node_children",
    "max_depth",
    "walk",
]
