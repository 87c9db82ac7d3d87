"""Tests for hjson_props.source."""

import pytest

from hjson_props.source import PropertySource


def _source():
    return PropertySource("app", {"b": "2", "a.x": "1"})


def test_get_property():
    src = _source()
    assert src.get_property("a.x") == "1"
    assert src.get_property("missing") is None
    assert src.get_property("missing", "dflt") == "dflt"

def test_contains():
    src = _source()
    assert src.contains_property("b")
    assert "b" in src
    assert "c" not in src

def test_property_names_in_order():
    assert _source().property_names == ("b", "a.x")

def test_getitem_and_len():
    src = _source()
    assert src["b"] == "2"
    assert len(src) == 2
    with pytest.raises(KeyError):
        src["nope"]
