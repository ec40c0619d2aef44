"""Shape classification for JSON serializability checks."""

from __future__ import annotations

import enum
import functools
import types
from typing import Any, Protocol, runtime_checkable

from pyserializable._constants import MAX_SAFE_INTEGER


class Undefined:
    """Type of the ``UNDEFINED`` sentinel.

    Marks a value as missing, as opposed to ``None`` which is JSON ``null``.
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined()


@runtime_checkable
class JSONTransformable(Protocol):
    """A value that can supply a JSON-ready substitute for itself."""

    def to_json(self) -> Any: ...


class ValueKind(enum.StrEnum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    UNDEFINED = "undefined"
    RECORD = "record"
    SEQUENCE = "sequence"
    UNSUPPORTED = "unsupported"


_FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    functools.partial,
    type,
)


def is_plain_object(value: Any) -> bool:
    """Check for a bare ``dict`` with no subclass identity."""
    return type(value) is dict


def is_sequence(value: Any) -> bool:
    return type(value) in (list, tuple)


def is_safe_integer(value: int) -> bool:
    return -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def classify(value: Any) -> ValueKind:
    """Classify a value into one of the recognized JSON shapes.

    Transform hooks are not consulted; callers apply them first.
    """
    if value is None:
        return ValueKind.NULL
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.NUMBER if is_safe_integer(value) else ValueKind.UNSUPPORTED
    if isinstance(value, float):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if is_plain_object(value):
        return ValueKind.RECORD
    if is_sequence(value):
        return ValueKind.SEQUENCE
    return ValueKind.UNSUPPORTED


def has_transform_hook(value: Any) -> bool:
    """Check whether ``value`` exposes a callable ``to_json()``.

    Classes are excluded; their ``to_json`` is an unbound method.
    """
    if value is None or isinstance(value, type):
        return False
    return isinstance(value, JSONTransformable) and callable(value.to_json)


def type_tag(value: Any) -> str:
    """Coarse type name used in unsupported-type messages."""
    if isinstance(value, _FUNCTION_TYPES):
        return "function"
    if isinstance(value, int) and not isinstance(value, bool):
        return "int"
    return "object"


def runtime_tag(value: Any) -> str:
    """Qualified class name, e.g. ``datetime.datetime`` or ``set``."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
