#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/api.py
"""Convenience entry point for parsing tag markup."""

from __future__ import annotations

import logging
from typing import Any, Optional

from bbmark.ast import Node
from bbmark.exceptions import ValidationError
from bbmark.options.markup import MarkupParserOptions
from bbmark.parsers.markup import MarkupParser

logger = logging.getLogger(__name__)


def parse(
    markup: str,
    *,
    parser_options: Optional[MarkupParserOptions] = None,
    **kwargs: Any,
) -> list[Node]:
    """Parse tag markup into a list of AST nodes.

    Parameters
    ----------
    markup : str
        The complete markup document
    parser_options : MarkupParserOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options that override settings in parser_options
        (e.g., ``max_nesting_depth=16``)

    Returns
    -------
    list of Node
        Top-level Text and Block nodes in source order

    Raises
    ------
    MarkupSyntaxError
        If the markup does not match the grammar
    ValidationError
        If an option name is unknown, or the input is invalid

    Examples
    --------
        >>> from bbmark import parse
        >>> parse("[foo=bar][xx=123][/xx][/foo]")
        [Block(tag='foo', value='bar', children=[Block(tag='xx', value='123', children=[])])]

    """
    options = parser_options or MarkupParserOptions()
    if kwargs:
        logger.debug("Overriding parser options: %s", sorted(kwargs))
        try:
            options = options.create_updated(**kwargs)
        except TypeError as e:
            raise ValidationError(
                f"Unknown parser option(s): {', '.join(sorted(kwargs))}",
                parameter_name="kwargs",
                parameter_value=kwargs,
                original_error=e,
            ) from e
    return MarkupParser(options).parse(markup)
