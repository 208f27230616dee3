"""Property-based fuzzing tests for the markup parser.

This test module uses Hypothesis to generate well-formed markup as well as
arbitrary strings over the markup alphabet, and checks that the parser
either returns a well-formed tree or raises MarkupSyntaxError.

Test Coverage:
- Plain text without special characters is a single Text node
- Generated canonical markup reconstructs to the exact input
- Text node locations slice back to their content
- Arbitrary input never raises anything but MarkupSyntaxError
- Mismatched closing names always fail
"""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from bbmark.ast import EndOfInput, Text, ValidationVisitor, walk
from bbmark.exceptions import MarkupSyntaxError
from bbmark.parsers.markup import MarkupParser

from tests.utils import format_open_tag, reconstruct_markup

PARSER = MarkupParser()

safe_text = st.text(
    alphabet=st.characters(blacklist_characters='"\\[]/=', blacklist_categories=("Cs",)),
    min_size=1,
    max_size=20,
)
escape = st.sampled_from(['\\"', "\\\\", "\\n", "\\[", "\\]", "\\/", "\\="])
text_content = st.lists(st.one_of(safe_text, escape), min_size=1, max_size=5).map("".join)

names = st.text(
    alphabet=st.characters(blacklist_characters='"\\[]/= \t\n\r', blacklist_categories=("Cs",)),
    min_size=1,
    max_size=10,
)
values = st.one_of(st.none(), names, text_content)


def _block(tag, value, inner):
    return f"{format_open_tag(tag, value)}{''.join(inner)}[/{tag}]"


markup_piece = st.recursive(
    text_content,
    lambda children: st.builds(_block, names, values, st.lists(children, max_size=3)),
    max_leaves=10,
)
documents = st.lists(markup_piece, max_size=5).map("".join)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestMarkupFuzzing:
    """Property-based tests for the markup parser using Hypothesis."""

    @given(safe_text)
    def test_plain_text_is_single_node(self, text):
        """Test that text without special characters parses to itself."""
        assert PARSER.parse(text) == [Text(text)]

    @given(documents)
    def test_generated_markup_reconstructs(self, markup):
        """Test that canonical markup survives parse and reconstruction unchanged."""
        nodes = PARSER.parse(markup)
        assert reconstruct_markup(nodes) == markup
        ValidationVisitor().visit_all(nodes)

    @given(documents)
    def test_text_locations_slice_source(self, markup):
        """Test that every Text node's location covers exactly its content."""
        for node in walk(PARSER.parse(markup)):
            if isinstance(node, Text):
                loc = node.source_location
                assert markup[loc.start : loc.end] == node.content

    @given(st.text(alphabet='ab[]/="\\ \n', max_size=40))
    def test_arbitrary_input_handled_gracefully(self, markup):
        """Test that arbitrary input parses to a valid tree or raises MarkupSyntaxError."""
        try:
            nodes = PARSER.parse(markup)
        except MarkupSyntaxError as e:
            assert 0 <= e.position <= len(markup)
            assert e.describe()
        else:
            assert not any(isinstance(node, EndOfInput) for node in walk(nodes))
            ValidationVisitor().visit_all(nodes)

    @given(names, names, text_content)
    def test_mismatched_names_fail(self, head, tail, inner):
        """Test that a block closed with a different name never parses."""
        assume(head != tail)
        with pytest.raises(MarkupSyntaxError):
            PARSER.parse(f"[{head}]{inner}[/{tail}]")
