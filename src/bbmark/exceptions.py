#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the bbmark library.

This module defines specialized exception classes for the error conditions
that can occur while configuring and running the markup parser.

Exception Hierarchy
-------------------
- BBMarkError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser)

  - ParsingError (input document parsing failures)
    - MarkupSyntaxError (malformed or mismatched tag structure)
      - NestingDepthError (configured nesting limit exceeded)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bbmark.constants import ERROR_EXCERPT_RADIUS


class BBMarkError(Exception):
    """Base exception class for all bbmark-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(BBMarkError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when incorrect options class is provided to a parser.

    Parameters
    ----------
    parser_name : str
        Name of the parser that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        parser_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{parser_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the parser."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.parser_name = parser_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(BBMarkError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


@dataclass(frozen=True)
class RuleFrame:
    """One level of grammar context in a syntax error trace.

    Parameters
    ----------
    rule : str
        Name of the grammar rule that was active
    position : int
        Offset in the markup where the rule started

    """

    rule: str
    position: int


def line_and_column(markup: str, position: int) -> tuple[int, int]:
    """Return the 1-based line and column of ``position`` in ``markup``."""
    line = markup.count("\n", 0, position) + 1
    line_start = markup.rfind("\n", 0, position) + 1
    return line, position - line_start + 1


def _excerpt(markup: str, position: int) -> str:
    line_start = markup.rfind("\n", 0, position) + 1
    line_end = markup.find("\n", position)
    if line_end == -1:
        line_end = len(markup)
    start = max(line_start, position - ERROR_EXCERPT_RADIUS)
    end = min(line_end, position + ERROR_EXCERPT_RADIUS)
    return f"{markup[start:end]}\n{' ' * (position - start)}^"


class MarkupSyntaxError(ParsingError):
    """Exception raised when markup does not match the tag grammar.

    Parameters
    ----------
    message : str
        Description of what went wrong
    markup : str
        The complete markup that was being parsed
    position : int
        Offset of the failure in ``markup``
    rule : str
        Innermost grammar rule that failed
    fatal : bool, default False
        Whether the failure happened after the grammar committed to a rule
    expected : str, optional
        What the failing rule expected at ``position``
    trace : tuple of RuleFrame, default ()
        Rule context from the outermost rule to the innermost one

    Attributes
    ----------
    line : int
        1-based line of the failure
    column : int
        1-based column of the failure

    """

    def __init__(
        self,
        message: str,
        markup: str,
        position: int,
        rule: str,
        fatal: bool = False,
        expected: str | None = None,
        trace: tuple[RuleFrame, ...] = (),
    ):
        """Initialize the syntax error with location and rule context."""
        super().__init__(message, parsing_stage=rule)
        self.markup = markup
        self.position = position
        self.rule = rule
        self.fatal = fatal
        self.expected = expected
        self.trace = trace
        self.line, self.column = line_and_column(markup, position)

    def describe(self) -> str:
        """Render the rule trace with a source excerpt for every frame.

        Returns
        -------
        str
            Multi-line diagnostic, outermost rule first

        """
        frames = self.trace or (RuleFrame(self.rule, self.position),)
        parts = [f"{self.__class__.__name__}: {self.message}"]
        for depth, frame in enumerate(frames):
            line, column = line_and_column(self.markup, frame.position)
            parts.append(f"{depth}: at line {line}, column {column}, in {frame.rule}:")
            parts.append(_excerpt(self.markup, frame.position))
        if frames[-1].position != self.position:
            parts.append(f"{len(frames)}: at line {self.line}, column {self.column}:")
            parts.append(_excerpt(self.markup, self.position))
        return "\n".join(parts)

    def __str__(self) -> str:
        kind = "fatal" if self.fatal else "no match"
        info = f"{self.message} (line {self.line}, column {self.column}, in {self.rule}, {kind})"
        return f"{info}\n{_excerpt(self.markup, self.position)}"


class NestingDepthError(MarkupSyntaxError):
    """Exception raised when blocks nest deeper than the configured maximum.

    Parameters
    ----------
    max_depth : int
        The configured nesting limit that was exceeded

    """

    def __init__(
        self,
        message: str,
        markup: str,
        position: int,
        max_depth: int,
        rule: str = "block",
        trace: tuple[RuleFrame, ...] = (),
    ):
        """Initialize the nesting depth error."""
        super().__init__(message, markup, position, rule, fatal=True, expected=None, trace=trace)
        self.max_depth = max_depth
