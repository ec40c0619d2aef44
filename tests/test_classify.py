"""Shape classification tests."""

import collections
import copy
import datetime
import enum
import functools
import pickle

import pytest

from pyserializable import UNDEFINED, Undefined, ValueKind, classify, is_plain_object
from pyserializable._classify import has_transform_hook, runtime_tag, type_tag


class Color(enum.IntEnum):
    RED = 1


class TestClassify:
    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, ValueKind.NULL),
            (UNDEFINED, ValueKind.UNDEFINED),
            (True, ValueKind.BOOLEAN),
            (0, ValueKind.NUMBER),
            (2.5, ValueKind.NUMBER),
            (float("nan"), ValueKind.NUMBER),
            (Color.RED, ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ({}, ValueKind.RECORD),
            ([], ValueKind.SEQUENCE),
            ((), ValueKind.SEQUENCE),
            (2**53, ValueKind.UNSUPPORTED),
            (-(2**53), ValueKind.UNSUPPORTED),
            (set(), ValueKind.UNSUPPORTED),
            (datetime.datetime(2024, 1, 1), ValueKind.UNSUPPORTED),
            (collections.OrderedDict(), ValueKind.UNSUPPORTED),
            (collections.namedtuple("P", "x")(1), ValueKind.UNSUPPORTED),
            (print, ValueKind.UNSUPPORTED),
        ],
    )
    def test_kind(self, value, kind):
        assert classify(value) is kind

    def test_does_not_call_hook(self):
        class Hooked:
            def to_json(self):
                raise AssertionError("should not be called")

        assert classify(Hooked()) is ValueKind.UNSUPPORTED


class TestIsPlainObject:
    def test_dict(self):
        assert is_plain_object({"a": 1})

    @pytest.mark.parametrize(
        "value", [[], collections.defaultdict(int), collections.OrderedDict(), object()]
    )
    def test_not_plain(self, value):
        assert not is_plain_object(value)


class TestTags:
    def test_function_tags(self):
        assert type_tag(lambda: None) == "function"
        assert type_tag(len) == "function"
        assert type_tag("".join) == "function"
        assert type_tag(int) == "function"

    @pytest.mark.parametrize(
        "value", [str.join, dict.fromkeys, dict.__dict__["fromkeys"], functools.partial(print, 1)]
    )
    def test_descriptor_and_partial_tags(self, value):
        assert type_tag(value) == "function"

    def test_int_tag(self):
        assert type_tag(2**64) == "int"

    def test_object_tag(self):
        assert type_tag(object()) == "object"

    def test_runtime_tag(self):
        assert runtime_tag(set()) == "set"
        assert runtime_tag(datetime.date(2024, 1, 1)) == "datetime.date"
        assert runtime_tag(collections.OrderedDict()) == "collections.OrderedDict"


class TestUndefinedSentinel:
    def test_singleton(self):
        assert Undefined() is UNDEFINED

    def test_falsy(self):
        assert not UNDEFINED

    def test_repr(self):
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_survives_copy(self):
        assert copy.deepcopy(UNDEFINED) is UNDEFINED

    def test_survives_pickle(self):
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


class TestHasTransformHook:
    def test_instance_with_hook(self):
        class Hooked:
            def to_json(self):
                return 1

        assert has_transform_hook(Hooked())
        assert not has_transform_hook(Hooked)

    def test_plain_values(self):
        assert not has_transform_hook(None)
        assert not has_transform_hook({"to_json": lambda: 1})
