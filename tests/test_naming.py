# tests/test_naming.py
"""
Unit tests for the object name formatter in ``svue.naming``.
"""

import pytest

from svue.naming import capitalize, format_object_name
from svue.registry import ObjectType


@pytest.mark.parametrize(
        ("raw", "expected"), [("my-component", "my-component"),  # hyphen present
                              ("MyWidget", "MyWidget"),  # two capitalised segments
                              ("myFooBar", "myFooBar"),  # two segments anywhere
                              ("Nav2Bar", "Nav2Bar"),  # digits inside a segment
                              ("Foo", "FooComponent"), ("fooBar", "FooBar"), ("widget", "widget-component"), ],
        ids = ["hyphen", "camel", "inner-camel", "digits", "leading-capital", "inner-capital", "lowercase"], )
def test_format_component_names(raw: str, expected: str) -> None:
    assert format_object_name(raw, ObjectType.COMPONENT) == expected


@pytest.mark.parametrize("object_type", [ObjectType.INTERFACE, ObjectType.MODEL, ObjectType.SERVICE])
def test_other_types_pass_through(object_type: ObjectType) -> None:
    assert format_object_name("anything", object_type) == "anything"
    assert format_object_name("Foo", object_type) == "Foo"


def test_accepts_plain_strings() -> None:
    assert format_object_name("widget", "component") == "widget-component"
    assert format_object_name("widget", "interface") == "widget"


def test_capitalize() -> None:
    assert capitalize("component") == "Component"
    assert capitalize("fooBar") == "FooBar"
    assert capitalize("") == ""
