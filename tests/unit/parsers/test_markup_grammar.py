#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for individual grammar rules and rule results."""

import pytest

from bbmark.ast import Block, EndOfInput, Text
from bbmark.exceptions import RuleFrame
from bbmark.parsers.grammar import MarkupGrammar
from bbmark.parsers.result import ErrorKind, Ok, failure, furthest, is_err, is_ok, no_match


def grammar(text: str) -> MarkupGrammar:
    return MarkupGrammar(text, track_locations=False)


@pytest.mark.unit
class TestResults:
    """Tests for the result helpers."""

    def test_cut_promotes_to_failure(self) -> None:
        err = no_match(3, "tag_key", "a name")
        assert not err.fatal
        assert err.cut().kind is ErrorKind.FAILURE
        assert err.cut().index == 3

    def test_within_prepends_frames(self) -> None:
        err = failure(8, "quoted_value", "a closing quote").within("tag_head", 0).within("block", 0)
        assert err.trace == (RuleFrame("block", 0), RuleFrame("tag_head", 0))

    def test_furthest(self) -> None:
        near = no_match(1, "a", "x")
        far = no_match(5, "b", "y")
        assert furthest(near, far) is far
        assert furthest(far, near) is far
        assert furthest(near, no_match(1, "c", "z")) is near

    def test_is_ok_and_is_err(self) -> None:
        assert is_ok(Ok("x", 1))
        assert is_err(no_match(0, "a", "x"))


@pytest.mark.unit
class TestLexicalRules:
    """Tests for text, unquoted and quoted tokens."""

    def test_escaped_stops_at_special(self) -> None:
        assert grammar(r"ab\[cd]").escaped(0, "plain_text") == Ok(r"ab\[cd", 6)

    def test_escaped_requires_content(self) -> None:
        res = grammar("[x]").escaped(0, "plain_text")
        assert is_err(res)
        assert not res.fatal

    def test_unquoted_skips_leading_whitespace(self) -> None:
        assert grammar("  foo bar").unquoted(0, "tag_key") == Ok("foo", 5)

    def test_unquoted_stops_at_separator(self) -> None:
        assert grammar("color=red").unquoted(0, "tag_key") == Ok("color", 5)

    def test_quoted(self) -> None:
        assert grammar('"a b"').quoted(0) == Ok("a b", 5)

    def test_quoted_soft_without_quote(self) -> None:
        res = grammar("abc").quoted(0)
        assert is_err(res)
        assert not res.fatal

    def test_quoted_fatal_without_terminator(self) -> None:
        res = grammar('"abc').quoted(0)
        assert is_err(res)
        assert res.fatal
        assert res.index == 4

    def test_tag_value_prefers_unquoted(self) -> None:
        assert grammar(" 123]").tag_value(0) == Ok("123", 4)
        assert grammar(' "1 2"]').tag_value(0) == Ok("1 2", 6)


@pytest.mark.unit
class TestTagRules:
    """Tests for tag heads and tails."""

    def test_tag_head_bare(self) -> None:
        assert grammar("[b]").tag_head(0) == Ok(("b", None), 3)

    def test_tag_head_with_spaces(self) -> None:
        assert grammar('[ foo = "bar " ]').tag_head(0) == Ok(("foo", "bar "), 16)

    def test_tag_head_rejects_closing_tag_softly(self) -> None:
        res = grammar("[/b]").tag_head(0)
        assert is_err(res)
        assert not res.fatal
        assert res.index == 1

    def test_tag_head_soft_on_other_input(self) -> None:
        res = grammar("abc").tag_head(0)
        assert is_err(res)
        assert not res.fatal

    def test_tag_head_fatal_after_bracket(self) -> None:
        res = grammar("[b").tag_head(0)
        assert is_err(res)
        assert res.fatal
        assert res.trace[0] == RuleFrame("tag_head", 0)

    def test_tag_tail(self) -> None:
        assert grammar("[/ foo ]").tag_tail(0) == Ok("foo", 8)

    def test_tag_tail_soft_on_opening_tag(self) -> None:
        res = grammar("[foo]").tag_tail(0)
        assert is_err(res)
        assert not res.fatal

    def test_tag_tail_fatal_without_name(self) -> None:
        res = grammar("[/]").tag_tail(0)
        assert is_err(res)
        assert res.fatal


@pytest.mark.unit
class TestTreeRules:
    """Tests for element, block, children and document rules."""

    def test_element_at_end_is_sentinel(self) -> None:
        res = grammar("ab").element(2, 1)
        assert is_ok(res)
        assert isinstance(res.value, EndOfInput)
        assert res.index == 2

    def test_element_prefers_text(self) -> None:
        assert grammar("ab[c][/c]").element(0, 1) == Ok(Text("ab"), 2)

    def test_block_mismatch_is_soft(self) -> None:
        res = grammar("[a][/b]").block(0, 1)
        assert is_err(res)
        assert not res.fatal

    def test_block(self) -> None:
        assert grammar("[a=1]x[/a]").block(0, 1) == Ok(Block("a", "1", [Text("x")]), 10)

    def test_children_stop_at_tail(self) -> None:
        res = grammar("x[/a]").children(0, 1)
        assert is_ok(res)
        nodes, stop = res.value
        assert nodes == [Text("x")]
        assert stop is not None and not stop.fatal
        assert res.index == 1

    def test_children_stop_at_end(self) -> None:
        res = grammar("x").children(0, 1)
        assert is_ok(res)
        assert res.value == ([Text("x")], None)

    def test_document(self) -> None:
        res = grammar("a[b]c[/b]").document()
        assert res == Ok([Text("a"), Block("b", None, [Text("c")])], 9)

    @pytest.mark.parametrize("markup", ["", "a", "a[b]c[/b]d", "[a][b][/b][/a]", 'x[q="1 2"]y[/q]\n'])
    def test_document_consumes_all_input(self, markup) -> None:
        res = grammar(markup).document()
        assert is_ok(res)
        assert res.index == len(markup)

    def test_innermost_block_restored_after_close(self) -> None:
        g = grammar("[a][b][/b]x[/a]")
        assert is_ok(g.document())
        assert g.innermost_block == 0

    def test_document_error_has_document_frame(self) -> None:
        res = grammar("[a]").document()
        assert is_err(res)
        assert res.trace[0] == RuleFrame("document", 0)

    def test_locate(self) -> None:
        g = MarkupGrammar("ab\ncd\n\nef")
        assert g.locate(0, 1).line == 1
        assert (g.locate(4, 5).line, g.locate(4, 5).column) == (2, 2)
        assert (g.locate(7, 9).line, g.locate(7, 9).column) == (4, 1)
