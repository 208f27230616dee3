#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for processing parsed markup.
Every node type has an abstract ``visit_*`` method, so a concrete visitor
that forgets a variant cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from bbmark.ast.nodes import Block, EndOfInput, Node, Text
from bbmark.constants import UNQUOTED_STOP_CHARS


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one visit_* method per node type. Visiting a list of
    nodes is done with :meth:`visit_all`.

    Examples
    --------
    Visitor that counts blocks:

        >>> class BlockCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         pass
        ...
        ...     def visit_block(self, node):
        ...         self.count += 1
        ...         self.visit_all(node.children)
        ...
        ...     def visit_end_of_input(self, node):
        ...         pass
        ...
        >>> counter = BlockCounter()
        >>> _ = counter.visit_all(parse("[a][b][/b][/a]"))
        >>> counter.count
        2

    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node.

        Parameters
        ----------
        node : Block
            The block node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_end_of_input(self, node: EndOfInput) -> Any:
        """Visit an EndOfInput sentinel."""
        pass

    def visit_all(self, nodes: list[Node]) -> list[Any]:
        """Visit every node in ``nodes`` in order and collect the results."""
        return [node.accept(self) for node in nodes]


class ValidationVisitor(NodeVisitor):
    """Visitor that validates a parsed tree against the markup invariants.

    The checks are:
    - Block tags are non-empty and contain no whitespace or special characters
    - Block children is a list (never None)
    - No EndOfInput sentinel appears in the tree

    Parameters
    ----------
    strict : bool, default = True
        Raise ValueError on the first problem instead of collecting it

    Attributes
    ----------
    errors : list of str
        Problems found so far (non-strict mode)

    Examples
    --------
        >>> validator = ValidationVisitor(strict=False)
        >>> _ = validator.visit_all([Block(tag="bad tag")])
        >>> validator.errors
        ["Invalid tag name 'bad tag'"]

    """

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []

    def _report(self, message: str) -> None:
        if self.strict:
            raise ValueError(message)
        self.errors.append(message)

    def visit_text(self, node: Text) -> None:
        """Validate a text node."""
        if not isinstance(node.content, str):
            self._report(f"Text content must be a string, got {type(node.content).__name__}")

    def visit_block(self, node: Block) -> None:
        """Validate a block node and its children."""
        if not node.tag or any(char in UNQUOTED_STOP_CHARS for char in node.tag):
            self._report(f"Invalid tag name {node.tag!r}")
        if node.children is None:
            self._report(f"Children of [{node.tag}] must be a list, not None")
            return
        self.visit_all(node.children)

    def visit_end_of_input(self, node: EndOfInput) -> None:
        """Reject sentinels that leaked into a tree."""
        self._report("EndOfInput sentinel found in parsed tree")


__all__ = [
    "NodeVisitor",
    "ValidationVisitor",
]
