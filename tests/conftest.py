"""Shared test fixtures for Twig tests.

Created: 2026-10-19
"""

import pytest

from twig.config.settings import Settings
from twig.core.dispatch import CommandDispatcher
from twig.core.tree_store import TreeStore

from tests.utils import build_store


@pytest.fixture
def store():
    """Empty tree store."""
    return TreeStore()


@pytest.fixture
def dispatcher(store):
    """Dispatcher with the default keymap over the empty store."""
    return CommandDispatcher(store)


@pytest.fixture
def sample_store():
    """Standard test outline.

    A
      B
      C
        D
    E
    """
    return build_store(
        ("A", [("B", []), ("C", [("D", [])])]),
        ("E", []),
    )


@pytest.fixture
def settings(tmp_path):
    """Default settings with logs kept under tmp_path."""
    settings = Settings()
    settings.logging.file = str(tmp_path / "twig.log")
    return settings
