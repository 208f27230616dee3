"""Pytest configuration and shared fixtures for the bbmark test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from bbmark import MarkupParser, MarkupParserOptions

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def parser() -> MarkupParser:
    """Provide a markup parser with default options."""
    return MarkupParser()


@pytest.fixture
def strict_parser() -> MarkupParser:
    """Provide a markup parser with tight limits for untrusted input."""
    return MarkupParser(MarkupParserOptions(max_nesting_depth=4, max_input_length=256))
