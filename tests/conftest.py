"""Shared test fixtures."""

import pytest


@pytest.fixture
def subject():
    return "/blog/[slug]"


@pytest.fixture
def operation():
    return "get_static_props"


@pytest.fixture
def nested_props():
    return {
        "title": "Hello",
        "count": 3,
        "ratio": 0.5,
        "draft": False,
        "author": None,
        "tags": ["a", "b"],
        "meta": {"foo bar": [1, 2, {"deep": True}]},
    }
