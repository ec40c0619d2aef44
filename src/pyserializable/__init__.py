"""pyserializable - Check that values are losslessly representable as JSON."""

from __future__ import annotations

__version__ = "0.1.0"

from typing import Any

from pyserializable._checker import Checker
from pyserializable._classify import (
    UNDEFINED,
    JSONTransformable,
    Undefined,
    ValueKind,
    classify,
    is_plain_object,
)
from pyserializable._constants import DEFAULT_SUBJECT_KIND
from pyserializable._errors import (
    CircularReferenceError,
    ErrorKind,
    HookInvocationError,
    MaxDepthExceededError,
    NotAPlainObjectError,
    SerializableError,
    UndefinedValueError,
    UnsupportedTypeError,
)
from pyserializable._paths import index_path, key_path

__all__ = [
    "check_serializable",
    "is_serializable",
    "classify",
    "is_plain_object",
    "key_path",
    "index_path",
    "UNDEFINED",
    "Undefined",
    "JSONTransformable",
    "ValueKind",
    "ErrorKind",
    "SerializableError",
    "NotAPlainObjectError",
    "UndefinedValueError",
    "CircularReferenceError",
    "UnsupportedTypeError",
    "HookInvocationError",
    "MaxDepthExceededError",
]


def check_serializable(
    subject: str,
    operation: str,
    value: Any,
    *,
    subject_kind: str = DEFAULT_SUBJECT_KIND,
    max_depth: int | None = None,
) -> bool:
    """Check that ``value`` can be handed to a JSON serializer without loss.

    Args:
        subject: Name of what produced the value, e.g. a page path.
        operation: Name of the function that returned the value.
        value: The value to check. Must be a plain ``dict``.
        subject_kind: Noun for the root value in messages. Defaults to "props".
        max_depth: Maximum nesting depth. Defaults to unbounded.

    Returns:
        True if the value is serializable.

    Raises:
        NotAPlainObjectError: If ``value`` is not a plain dict.
        SerializableError: For the first part of ``value`` JSON cannot express.
    """
    checker = Checker(
        subject, operation, subject_kind=subject_kind, max_depth=max_depth
    )
    return checker.check_root(value)


def is_serializable(value: Any, *, max_depth: int | None = None) -> bool:
    """Return whether ``value`` (of any shape) can be serialized as JSON."""
    checker = Checker("", "", max_depth=max_depth)
    try:
        return checker.visit({}, value, "")
    except SerializableError:
        return False
