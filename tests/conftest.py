"""Pytest fixtures for truncstr tests."""

import pytest


@pytest.fixture
def sample_texts():
    """Strings covering the empty, short, exact and overlong cases."""
    return ["", "a", "abc", "abcde", "abcdef", "hello world", "x" * 100]


@pytest.fixture
def config_file(tmp_path):
    """Create a config file with a custom width."""
    path = tmp_path / "truncstr.yaml"
    path.write_text("truncstr:\n  width: 5\n", encoding="utf-8")
    return path
