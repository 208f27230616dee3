#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbmark/options/markup.py
"""Configuration options for tag markup parsing.

This module defines the options class for the bracket tag markup parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bbmark.constants import DEFAULT_MAX_NESTING_DEPTH, DEFAULT_TRACK_SOURCE_LOCATIONS
from bbmark.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkupParserOptions(BaseParserOptions):
    """Configuration options for markup-to-AST parsing.

    Parameters
    ----------
    max_nesting_depth : int, default 128
        Maximum number of nested blocks. Each level of nesting costs several
        interpreter stack frames, so deeper input fails with a
        NestingDepthError instead of exhausting the stack.
    track_source_locations : bool, default True
        Whether to attach a SourceLocation (offsets, line and column) to
        every parsed node.

    Examples
    --------
    Basic usage:
        >>> from bbmark.parsers.markup import MarkupParser
        >>> from bbmark.options.markup import MarkupParserOptions
        >>> parser = MarkupParser(MarkupParserOptions())
        >>> nodes = parser.parse("[b]Bold text[/b]")

    Tighter limits for untrusted input:
        >>> options = MarkupParserOptions(max_nesting_depth=16, max_input_length=65536)

    """

    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum depth of nested tag blocks", "type": int, "importance": "security"},
    )
    track_source_locations: bool = field(
        default=DEFAULT_TRACK_SOURCE_LOCATIONS,
        metadata={
            "help": "Attach source offsets, line and column to parsed nodes",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")
