#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/parsers/result.py
"""Result values returned by grammar rules.

A rule returns either ``Ok(value, index)``, where ``index`` is the offset
just past the consumed input, or an ``Err``. Errors come in two kinds:

- ``ErrorKind.NO_MATCH``: the rule does not apply here; the caller may try
  another alternative.
- ``ErrorKind.FAILURE``: the rule committed to a prefix and then failed;
  alternatives must not be tried and the error propagates to the top.

"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Generic, TypeGuard, TypeVar, Union

from bbmark.exceptions import RuleFrame

T = TypeVar("T")


class ErrorKind(enum.Enum):
    NO_MATCH = "no_match"
    FAILURE = "failure"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    index: int


@dataclass(frozen=True)
class Err:
    """A rule that did not produce a value.

    Parameters
    ----------
    index : int
        Offset where the failure was detected
    kind : ErrorKind
        Soft non-match or fatal failure
    rule : str
        Innermost rule that produced the error
    expected : str
        What the rule needed at ``index``
    trace : tuple of RuleFrame, default ()
        Enclosing rules, outermost first
    depth_limit : int or None, default None
        Set when the failure is the nesting limit being exceeded

    """

    index: int
    kind: ErrorKind
    rule: str
    expected: str
    trace: tuple[RuleFrame, ...] = ()
    depth_limit: int | None = None

    @property
    def fatal(self) -> bool:
        return self.kind is ErrorKind.FAILURE

    def cut(self) -> Err:
        """Promote a soft non-match to a fatal failure."""
        if self.fatal:
            return self
        return replace(self, kind=ErrorKind.FAILURE)

    def within(self, rule: str, position: int) -> Err:
        """Record that this error happened inside ``rule`` started at ``position``."""
        return replace(self, trace=(RuleFrame(rule, position),) + self.trace)


ParseResult = Union[Ok[T], Err]


def no_match(index: int, rule: str, expected: str) -> Err:
    return Err(index, ErrorKind.NO_MATCH, rule, expected)


def failure(index: int, rule: str, expected: str) -> Err:
    return Err(index, ErrorKind.FAILURE, rule, expected)


def is_ok(res: ParseResult[T]) -> TypeGuard[Ok[T]]:
    return isinstance(res, Ok)


def is_err(res: ParseResult[T]) -> TypeGuard[Err]:
    return isinstance(res, Err)


def furthest(first: Err, second: Err) -> Err:
    """Pick the error that got further into the input; ties go to ``first``."""
    return second if second.index > first.index else first
