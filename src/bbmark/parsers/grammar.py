#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/parsers/grammar.py
"""Recursive descent grammar for bracket tag markup.

The grammar, leaves first::

    text        := ( [^"\\[]/=]+ | "\\" ["\\n[]/=] )+
    unquoted    := ws [^"\\[]/= \\t\\n\\r]+
    quoted      := '"' ! text '"'
    value       := ws ( unquoted | quoted )
    tag_head    := "[" !"/" ! unquoted ( ws "=" value )? ws "]"
    tag_tail    := "[/" ! value ws "]"
    block       := tag_head element* tag_tail      (head name == tail name)
    element     := end-of-input | text | block
    document    := element* end-of-input

``!`` marks a cut: once the rule has matched the prefix before it, any
later miss is a fatal failure rather than a non-match.

Every rule is a method taking the offset to start at and returning a
:class:`~bbmark.parsers.result.ParseResult`. Rules never raise.
"""

from __future__ import annotations

import bisect
import re
from typing import Optional

from bbmark.ast.nodes import Block, EndOfInput, Node, SourceLocation, Text
from bbmark.constants import (
    DEFAULT_MAX_NESTING_DEPTH,
    QUOTE_CHAR,
    TAG_CLOSE,
    TAG_OPEN,
    TAG_TAIL_MARKER,
    TAG_TAIL_OPEN,
    TEXT_SPECIAL_CHARS,
    VALUE_SEPARATOR,
)
from bbmark.parsers.result import (
    Err,
    ErrorKind,
    Ok,
    ParseResult,
    failure,
    furthest,
    is_err,
    is_ok,
    no_match,
)

# Unescaped run, or a backslash followed by one of the escapable characters
TEXT_RUN = re.compile(r'(?:[^"\\\[\]/=]+|\\["\\n\[\]/=])+')

UNQUOTED_RUN = re.compile(r'[^"\\\[\]/= \t\n\r]+')

WHITESPACE = re.compile(r"[ \t\n\r]*")

Attribute = tuple[str, Optional[str]]


class MarkupGrammar:
    """Grammar rules bound to one input string.

    Parameters
    ----------
    text : str
        The complete markup to parse
    max_depth : int, default 128
        Maximum block nesting depth
    track_locations : bool, default True
        Whether created nodes get a SourceLocation

    """

    def __init__(
        self, text: str, max_depth: int = DEFAULT_MAX_NESTING_DEPTH, track_locations: bool = True
    ) -> None:
        self.text = text
        self.max_depth = max_depth
        self.track_locations = track_locations
        self._line_starts: list[int] | None = None
        # Start offset of the innermost block whose children are being parsed
        self.innermost_block = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _at(self, i: int, literal: str) -> bool:
        return self.text.startswith(literal, i)

    def _skip_ws(self, i: int) -> int:
        return WHITESPACE.match(self.text, i).end()  # type: ignore[union-attr]

    def locate(self, start: int, end: int) -> SourceLocation | None:
        """Build the SourceLocation for ``text[start:end]``, if tracking is on."""
        if not self.track_locations:
            return None
        if self._line_starts is None:
            self._line_starts = [0] + [m.end() for m in re.finditer("\n", self.text)]
        line = bisect.bisect_right(self._line_starts, start)
        return SourceLocation(start, end, line, start - self._line_starts[line - 1] + 1)

    # ------------------------------------------------------------------
    # Lexical layer
    # ------------------------------------------------------------------

    def escaped(self, i: int, rule: str) -> ParseResult[str]:
        """Match a non-empty run of text, stepping over backslash escapes."""
        match = TEXT_RUN.match(self.text, i)
        end = match.end() if match else i
        # A backslash the run could not consume starts an invalid escape
        if self._at(end, "\\"):
            return no_match(end, rule, 'an escape sequence (one of \\" \\\\ \\n \\[ \\] \\/ \\=)')
        if end == i:
            if i < len(self.text) and self.text[i] in TEXT_SPECIAL_CHARS:
                return no_match(i, rule, f"text (found unescaped {self.text[i]!r})")
            return no_match(i, rule, "text")
        return Ok(self.text[i:end], end)

    def unquoted(self, i: int, rule: str) -> ParseResult[str]:
        """Match a name or unquoted value, skipping leading whitespace."""
        start = self._skip_ws(i)
        match = UNQUOTED_RUN.match(self.text, start)
        if match is None:
            return no_match(start, rule, "a name")
        return Ok(match.group(), match.end())

    def quoted(self, i: int) -> ParseResult[str]:
        """Match a double-quoted value and return it without the quotes."""
        if not self._at(i, QUOTE_CHAR):
            return no_match(i, "quoted_value", "an opening quote")

        # committed
        body = self.escaped(i + 1, "quoted_value")
        if is_err(body):
            return body.cut().within("quoted_value", i)
        if not self._at(body.index, QUOTE_CHAR):
            return failure(body.index, "quoted_value", "a closing quote").within("quoted_value", i)
        return Ok(body.value, body.index + 1)

    def plain_text(self, i: int) -> ParseResult[Text]:
        res = self.escaped(i, "plain_text")
        if is_err(res):
            return res
        return Ok(Text(res.value, self.locate(i, res.index)), res.index)

    # ------------------------------------------------------------------
    # Tag heads and tails
    # ------------------------------------------------------------------

    def tag_value(self, i: int) -> ParseResult[str]:
        """Match an unquoted or quoted value after optional whitespace."""
        start = self._skip_ws(i)
        res = self.unquoted(start, "tag_value")
        if is_ok(res):
            return res
        quoted = self.quoted(start)
        if is_ok(quoted) or quoted.fatal:
            return quoted
        return no_match(start, "tag_value", "a value or a quoted value")

    def tag_attribute(self, i: int) -> ParseResult[Attribute]:
        """Match ``name`` or ``name = value`` inside a tag head."""
        key = self.unquoted(i, "tag_key")
        if is_err(key):
            return key.within("tag_attribute", i)
        j = self._skip_ws(key.index)
        if not self._at(j, VALUE_SEPARATOR):
            return Ok((key.value, None), key.index)
        value = self.tag_value(j + 1)
        if is_err(value):
            return value.within("tag_attribute", i)
        return Ok((key.value, value.value), value.index)

    def tag_head(self, i: int) -> ParseResult[Attribute]:
        """Match an opening tag and return its name and optional value."""
        if not self._at(i, TAG_OPEN):
            return no_match(i, "tag_head", "'['")
        if self._at(i + 1, TAG_TAIL_MARKER):
            return no_match(i + 1, "tag_head", "an opening tag (found a closing tag)")

        # committed now
        attribute = self.tag_attribute(i + 1)
        if is_err(attribute):
            return attribute.cut().within("tag_head", i)
        j = self._skip_ws(attribute.index)
        if not self._at(j, TAG_CLOSE):
            return failure(j, "tag_head", "']' to end the opening tag").within("tag_head", i)
        return Ok(attribute.value, j + 1)

    def tag_tail(self, i: int) -> ParseResult[str]:
        """Match a closing tag and return its name."""
        if not self._at(i, TAG_TAIL_OPEN):
            return no_match(i, "tag_tail", "'[/'")

        # committed now
        name = self.tag_value(i + len(TAG_TAIL_OPEN))
        if is_err(name):
            return name.cut().within("tag_tail", i)
        j = self._skip_ws(name.index)
        if not self._at(j, TAG_CLOSE):
            return failure(j, "tag_tail", "']' to end the closing tag").within("tag_tail", i)
        return Ok(name.value, j + 1)

    # ------------------------------------------------------------------
    # Tree assembly
    # ------------------------------------------------------------------

    def children(self, i: int, depth: int) -> ParseResult[tuple[list[Node], Optional[Err]]]:
        """Collect elements until one does not match.

        Returns the collected nodes and the soft error that stopped the
        loop (None when it stopped at the end of the input).
        """
        nodes: list[Node] = []
        while True:
            res = self.element(i, depth)
            if is_err(res):
                if res.fatal:
                    return res
                return Ok((nodes, res), i)
            if isinstance(res.value, EndOfInput):
                return Ok((nodes, None), i)
            nodes.append(res.value)
            i = res.index

    def block(self, i: int, depth: int) -> ParseResult[Block]:
        """Match ``tag_head children tag_tail`` with equal names."""
        head = self.tag_head(i)
        if is_err(head):
            return head.within("block", i)
        if depth > self.max_depth:
            return Err(
                i,
                ErrorKind.FAILURE,
                "block",
                f"at most {self.max_depth} levels of nested blocks",
                depth_limit=self.max_depth,
            ).within("block", i)
        key, value = head.value
        parent, self.innermost_block = self.innermost_block, i

        inner = self.children(head.index, depth + 1)
        self.innermost_block = parent
        if is_err(inner):
            return inner.within("block", i)
        nodes, stop = inner.value
        j = inner.index

        if j >= len(self.text):
            return no_match(j, "block", f"'[/{key}]' before the end of the input").within("block", i)
        tail = self.tag_tail(j)
        if is_err(tail):
            if stop is not None and not tail.fatal:
                tail = furthest(stop, tail)
            return tail.within("block", i)
        if tail.value != key:
            return no_match(j, "block", f"'[/{key}]' (found '[/{tail.value}]')").within("block", i)
        return Ok(Block(key, value, nodes, self.locate(i, tail.index)), tail.index)

    def element(self, i: int, depth: int) -> ParseResult[Node]:
        """Match end of input, a text run or a block, in that order."""
        if i >= len(self.text):
            return Ok(EndOfInput(self.locate(i, i)), i)
        text = self.plain_text(i)
        if is_ok(text):
            return text
        block = self.block(i, depth)
        if is_ok(block) or block.fatal:
            return block
        return furthest(text, block)

    def document(self) -> ParseResult[list[Node]]:
        """Parse elements until the input is exhausted."""
        nodes: list[Node] = []
        i = 0
        while i < len(self.text):
            res = self.element(i, 1)
            if is_err(res):
                return res.within("document", 0)
            if isinstance(res.value, EndOfInput):
                break
            nodes.append(res.value)
            i = res.index
        return Ok(nodes, i)
