#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbmark/constants.py
"""Constants and defaults for the bbmark markup parser.

This module centralizes the lexical character classes used by the grammar
together with the default values of the parser options.
"""

from __future__ import annotations

# =============================================================================
# Lexical character classes
# =============================================================================

# Introduces an escape sequence in text and quoted values
ESCAPE_CHAR = "\\"

# Characters that end a plain-text run unless escaped
TEXT_SPECIAL_CHARS = frozenset('"\\[]/=')

# Characters allowed directly after the escape introducer
ESCAPABLE_CHARS = frozenset('"\\n[]/=')

# Whitespace skipped around tokens inside tag heads and tails
TAG_WHITESPACE_CHARS = frozenset(" \t\n\r")

# Characters that end an unquoted key or value token
UNQUOTED_STOP_CHARS = TEXT_SPECIAL_CHARS | TAG_WHITESPACE_CHARS

TAG_OPEN = "["
TAG_CLOSE = "]"
TAG_TAIL_OPEN = "[/"
TAG_TAIL_MARKER = "/"
VALUE_SEPARATOR = "="
QUOTE_CHAR = '"'

# =============================================================================
# Parser defaults
# =============================================================================

DEFAULT_MAX_NESTING_DEPTH = 128
DEFAULT_MAX_INPUT_LENGTH: int | None = None
DEFAULT_TRACK_SOURCE_LOCATIONS = True

# Number of characters shown on each side of the caret in error excerpts
ERROR_EXCERPT_RADIUS = 40
