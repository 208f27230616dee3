#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/parsers/base.py
"""Base classes for markup parsers.

This module defines the abstract base class that parsers inherit from. The
BaseParser provides option type checking and input validation shared by
every parser.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from bbmark.ast import Node
from bbmark.exceptions import InvalidOptionsError, ValidationError
from bbmark.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from bbmark.parsers.base import BaseParser
        >>> from bbmark.ast import Text
        >>>
        >>> class VerbatimParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return [Text(self._validate_input(input_data))]

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration.

        Parameters
        ----------
        options : BaseParserOptions or None, default = None
            Format-specific parsing options. If None, default options will be used.

        """
        self.options: BaseParserOptions = options or BaseParserOptions()

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                parser_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def _validate_input(self, input_data: Any) -> str:
        """Check that the input is text within the configured size limit.

        Raises
        ------
        ValidationError
            If the input is not a str or is longer than ``max_input_length``

        """
        if not isinstance(input_data, str):
            raise ValidationError(
                f"Markup input must be str, got {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=type(input_data),
            )
        limit = self.options.max_input_length
        if limit is not None and len(input_data) > limit:
            logger.warning("Rejecting markup input of %d characters (limit %d)", len(input_data), limit)
            raise ValidationError(
                f"Markup input is {len(input_data)} characters long, exceeding max_input_length={limit}",
                parameter_name="input_data",
                parameter_value=len(input_data),
            )
        return input_data

    @abstractmethod
    def parse(self, input_data: str) -> list[Node]:
        """Parse the input markup into a list of AST nodes.

        Parameters
        ----------
        input_data : str
            The complete markup document

        Returns
        -------
        list of Node
            Top-level nodes in source order

        Raises
        ------
        ParsingError
            If the input does not match the grammar
        ValidationError
            If the input is not text or is too long

        """
        raise NotImplementedError
