#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Concatenate the raw content of every Text node
walk : Iterate over nodes depth-first, parents before children
max_depth : Deepest block nesting in a list of nodes

Examples
--------
    >>> from bbmark import parse
    >>> from bbmark.ast.utils import extract_text, max_depth
    >>> nodes = parse("Hello [b]bold [i]world[/i][/b]")
    >>> extract_text(nodes)
    'Hello bold world'
    >>> max_depth(nodes)
    2

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Union

from bbmark.ast.nodes import Block, Text, get_node_children

if TYPE_CHECKING:
    from bbmark.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract the raw text from a node or list of nodes.

    Escape sequences are returned as they appear in the source.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String inserted between the text of sibling nodes

    Returns
    -------
    str
        Concatenated text content from all Text nodes

    """
    if isinstance(node_or_nodes, list):
        text_parts = []
        for node in node_or_nodes:
            extracted = extract_text(node, joiner=joiner)
            if extracted:
                text_parts.append(extracted)
        return joiner.join(text_parts)

    if isinstance(node_or_nodes, Text):
        return node_or_nodes.content

    return extract_text(get_node_children(node_or_nodes), joiner=joiner)


def walk(node_or_nodes: Union[Node, list[Node]]) -> Iterator[Node]:
    """Yield every node in pre-order.

    Uses an explicit stack, so arbitrarily deep trees do not hit the
    interpreter recursion limit.
    """
    roots = node_or_nodes if isinstance(node_or_nodes, list) else [node_or_nodes]
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(get_node_children(node)))


def max_depth(node_or_nodes: Union[Node, list[Node]]) -> int:
    """Return the deepest level of block nesting (0 when there are no blocks)."""
    roots = node_or_nodes if isinstance(node_or_nodes, list) else [node_or_nodes]
    deepest = 0
    stack = [(node, 1) for node in roots]
    while stack:
        node, level = stack.pop()
        if isinstance(node, Block):
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
    return deepest


__all__ = [
    "extract_text",
    "max_depth",
    "walk",
]
