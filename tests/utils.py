"""Test utilities for the bbmark test suite.

This module provides helpers for building markup in canonical form and for
reconstructing markup from a parsed tree, used by the round-trip tests.
"""

import re
from typing import Optional

from bbmark.ast import Block, EndOfInput, NodeVisitor, Text

UNQUOTED_VALUE = re.compile(r'[^"\\\[\]/= \t\n\r]+')


def format_open_tag(tag: str, value: Optional[str] = None) -> str:
    """Format an opening tag, quoting the value only when it needs quotes."""
    if value is None:
        return f"[{tag}]"
    if UNQUOTED_VALUE.fullmatch(value):
        return f"[{tag}={value}]"
    return f'[{tag}="{value}"]'


class MarkupReconstructor(NodeVisitor):
    """Rebuild canonical markup text from parsed nodes."""

    def visit_text(self, node: Text) -> str:
        return node.content

    def visit_block(self, node: Block) -> str:
        inner = "".join(self.visit_all(node.children))
        return f"{format_open_tag(node.tag, node.value)}{inner}[/{node.tag}]"

    def visit_end_of_input(self, node: EndOfInput) -> str:
        raise AssertionError("EndOfInput must not appear in a parsed tree")


def reconstruct_markup(nodes: list) -> str:
    """Return the canonical markup for ``nodes``."""
    return "".join(MarkupReconstructor().visit_all(nodes))
