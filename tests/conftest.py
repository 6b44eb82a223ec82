"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from core.graph import WordGraph
from data_processing.text_parser import tokenize


SAMPLE_TEXT = (
    "To explore strange new worlds,\n"
    "To seek out new life and new civilizations.\n"
    "To boldly go where no one has gone before."
)


@pytest.fixture
def sample_text() -> str:
    """Return a short multi-line corpus."""
    return SAMPLE_TEXT


@pytest.fixture
def text_graph() -> WordGraph:
    """Return a frozen graph built from the sample corpus."""
    return WordGraph.from_words(tokenize(SAMPLE_TEXT), freeze=True)


@pytest.fixture
def bridge_graph() -> WordGraph:
    """Return a graph with zero, one and two bridge words between known pairs."""
    return WordGraph.from_edge_list([
        ("explore", "to"),
        ("to", "seek"),
        ("to", "find"),
        ("seek", "new"),
        ("find", "new"),
        ("new", "worlds"),
        ("new", "life"),
        ("alpha", "beta"),
        ("test", "BRIDGE"),
        ("BRIDGE", "case"),
    ]).freeze()


@pytest.fixture
def chain_graph() -> WordGraph:
    """Return the chain a -> b -> c."""
    return WordGraph.from_edge_list([("a", "b"), ("b", "c")]).freeze()


@pytest.fixture
def loop_graph() -> WordGraph:
    """Return two words pointing at each other."""
    return WordGraph.from_edge_list([("a", "b"), ("b", "a")]).freeze()
