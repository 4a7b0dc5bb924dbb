"""
Shared fixtures for the aliasmap tests.
"""
import pytest

from aliasmap import AliasMap


@pytest.fixture
def alias_map():
    """An empty map."""
    return AliasMap()


@pytest.fixture
def colors():
    """A map with one aliased and one plain entry."""
    m = AliasMap()
    m.set("gray", "#808080", "grey", "neutral gray")
    m.set("red", "#ff0000")
    return m
