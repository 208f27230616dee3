#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/ast/nodes.py
"""AST node classes for parsed tag markup.

This module defines the closed set of element types produced by the markup
parser. Each node represents one piece of the source document: a run of
plain text, a matched open/close tag pair, or the end-of-input sentinel used
internally by the grammar.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

    - Text: raw text run, escape sequences kept verbatim
    - Block: ``[tag]...[/tag]`` or ``[tag=value]...[/tag]`` with children
    - EndOfInput: sentinel produced at the end of the input, never returned

Python strings cannot share memory with the input, so ``Text.content``,
``Block.tag`` and ``Block.value`` are slices copied out of the source. The
optional ``source_location`` records the offsets they were copied from.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    start : int
        Offset of the first character of the node in the source
    end : int
        Offset one past the last character of the node in the source
    line : int
        1-based line number of ``start``
    column : int
        1-based column number of ``start``

    """

    start: int
    end: int
    line: int
    column: int


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass
class Text(Node):
    """Plain text node.

    Holds a run of text exactly as it appeared in the source. Backslash
    escapes delimit the run during parsing but are not unescaped: the
    content of a run written as ``a\\[b`` keeps its backslash.

    Parameters
    ----------
    content : str
        Raw text content
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    source_location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass
class Block(Node):
    """Matched open/close tag pair.

    Parameters
    ----------
    tag : str
        Tag name from the opening tag, whitespace-trimmed
    value : str or None, default = None
        Attached value from ``[tag=value]`` or ``[tag="value"]`` (quotes
        removed); None for a bare ``[tag]``
    children : list of Node, default = empty list
        Elements strictly between the opening and closing tags, in source order
    source_location : SourceLocation or None, default = None
        Source location information, spanning both tags

    """

    tag: str
    value: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_block method

        Returns
        -------
        Any
            Result from visitor.visit_block(self)

        """
        return visitor.visit_block(self)


@dataclass
class EndOfInput(Node):
    """Sentinel produced by the element rule when no input remains.

    The document and children loops stop on this sentinel; it never appears
    in a parsed sequence.

    """

    source_location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this sentinel."""
        return visitor.visit_end_of_input(self)


Element = Union[Text, Block, EndOfInput]


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> block = Block(tag="b", children=[Text("Hello"), Block(tag="i")])
    >>> len(get_node_children(block))
    2

    """
    if isinstance(node, Block):
        return list(node.children)
    return []


__all__ = [
    "Block",
    "Element",
    "EndOfInput",
    "Node",
    "SourceLocation",
    "Text",
    "get_node_children",
]
