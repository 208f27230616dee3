#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/parsers/markup.py
"""Bracket tag markup to AST converter.

This module parses markup made of plain text and nested bracket tags such
as ``[b]``, ``[color=red]`` or ``[font="Noto Sans"]`` closed by a matching
``[/name]`` into a list of :class:`~bbmark.ast.Text` and
:class:`~bbmark.ast.Block` nodes.

Parsing is all-or-nothing: malformed tags, unclosed tags and mismatched
closing tags raise :class:`~bbmark.exceptions.MarkupSyntaxError` and no
partial tree is returned.
"""

from __future__ import annotations

import logging

from bbmark.ast import Node
from bbmark.exceptions import MarkupSyntaxError, NestingDepthError, RuleFrame
from bbmark.options.markup import MarkupParserOptions
from bbmark.parsers.base import BaseParser
from bbmark.parsers.grammar import MarkupGrammar
from bbmark.parsers.result import Err, is_err

logger = logging.getLogger(__name__)


class MarkupParser(BaseParser):
    """Convert tag markup to AST representation.

    Parameters
    ----------
    options : MarkupParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkupParser()
        >>> parser.parse('ssf[xx="123"]aaa[/xx]')
        [Text(content='ssf'), Block(tag='xx', value='123', children=[Text(content='aaa')])]

    With options:

        >>> options = MarkupParserOptions(max_nesting_depth=8)
        >>> parser = MarkupParser(options)
        >>> nodes = parser.parse(markup)

    """

    def __init__(self, options: MarkupParserOptions | None = None):
        """Initialize the markup parser with options."""
        BaseParser._validate_options_type(options, MarkupParserOptions, "markup")
        options = options or MarkupParserOptions()
        super().__init__(options)
        self.options: MarkupParserOptions = options

    def parse(self, input_data: str) -> list[Node]:
        """Parse markup into AST nodes.

        Parameters
        ----------
        input_data : str
            The complete markup document

        Returns
        -------
        list of Node
            Top-level Text and Block nodes in source order

        Raises
        ------
        MarkupSyntaxError
            If the markup does not match the grammar
        NestingDepthError
            If blocks nest deeper than ``max_nesting_depth``, or deeper than
            the interpreter stack allows when the limit is set very high
        ValidationError
            If the input is not a str or exceeds ``max_input_length``

        """
        markup = self._validate_input(input_data)
        logger.debug("Parsing %d characters of markup", len(markup))

        grammar = MarkupGrammar(
            markup,
            max_depth=self.options.max_nesting_depth,
            track_locations=self.options.track_source_locations,
        )
        try:
            result = grammar.document()
        except RecursionError as e:
            logger.warning(
                "Interpreter stack exhausted below max_nesting_depth=%d", self.options.max_nesting_depth
            )
            error = NestingDepthError(
                "Blocks are nested too deeply for the interpreter stack",
                markup,
                grammar.innermost_block,
                max_depth=self.options.max_nesting_depth,
            )
            error.original_error = e
            raise error from e
        if is_err(result):
            error = self._to_exception(result, markup)
            logger.debug("Markup parsing failed:\n%s", error.describe())
            raise error

        # Guard: document() only returns Ok once the whole input is consumed
        if result.index != len(markup):
            raise MarkupSyntaxError(
                f"Unconsumed input after offset {result.index}",
                markup,
                result.index,
                "document",
                fatal=True,
                expected="end of input",
                trace=(RuleFrame("document", 0),),
            )

        logger.debug("Parsed %d top-level elements", len(result.value))
        return result.value

    @staticmethod
    def _to_exception(err: Err, markup: str) -> MarkupSyntaxError:
        """Convert a failed grammar result into the exception raised to callers."""
        if err.depth_limit is not None:
            return NestingDepthError(
                f"Blocks are nested more than {err.depth_limit} levels deep",
                markup,
                err.index,
                max_depth=err.depth_limit,
                rule=err.rule,
                trace=err.trace,
            )
        return MarkupSyntaxError(
            f"Expected {err.expected}",
            markup,
            err.index,
            err.rule,
            fatal=err.fatal,
            expected=err.expected,
            trace=err.trace,
        )
