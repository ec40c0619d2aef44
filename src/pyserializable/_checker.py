"""Core Checker class - recursive JSON serializability walk."""

from __future__ import annotations

import logging
import reprlib
from collections.abc import Mapping
from typing import Any

from pyserializable._classify import (
    ValueKind,
    classify,
    has_transform_hook,
    runtime_tag,
    type_tag,
)
from pyserializable._constants import DEFAULT_SUBJECT_KIND, TRANSFORM_HOOK_NAME
from pyserializable._errors import (
    ERR_MSG_MAX_DEPTH_EXCEEDED,
    ERR_MSG_UNDEFINED,
    ERR_MSG_UNSUPPORTED_KEY,
    ERR_MSG_UNSUPPORTED_TYPE,
    CircularReferenceError,
    HookInvocationError,
    MaxDepthExceededError,
    NotAPlainObjectError,
    SerializableError,
    UndefinedValueError,
    UnsupportedTypeError,
)
from pyserializable._paths import index_path, key_path

logger = logging.getLogger(__name__)

Refs = Mapping[int, str]
"""Visitation record: ``id()`` of an ancestor composite -> path first seen at."""


class Checker:
    """Walks a value and raises on the first part that JSON cannot express.

    The visitation record handed to each child is never mutated afterwards,
    so siblings only share the ancestor chain: a value reachable from two
    siblings is accepted, a value reachable from itself is not.
    """

    def __init__(
        self,
        subject: str,
        operation: str,
        *,
        subject_kind: str = DEFAULT_SUBJECT_KIND,
        max_depth: int | None = None,
    ) -> None:
        self._subject = subject
        self._operation = operation
        self._subject_kind = subject_kind
        self._max_depth = max_depth

    def check_root(self, value: Any) -> bool:
        """Require a plain dict at the root, then walk it."""
        if classify(value) is not ValueKind.RECORD:
            raise self._error(
                NotAPlainObjectError,
                "",
                f"{self._subject_kind.capitalize()} must be a plain object (dict) "
                f"returned from `{self._operation}`.",
                f"root value has type {runtime_tag(value)}",
            )
        return self.visit({}, value, "")

    def visit(self, refs: Refs, value: Any, path: str, depth: int = 0) -> bool:
        if self._max_depth is not None and depth > self._max_depth:
            raise self._error(
                MaxDepthExceededError,
                path,
                ERR_MSG_MAX_DEPTH_EXCEEDED,
                f"nesting depth {depth} exceeds limit {self._max_depth}",
            )

        value = self._apply_hook(value, path)
        kind = classify(value)

        if kind in (ValueKind.NULL, ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING):
            return True

        if kind is ValueKind.UNDEFINED:
            raise self._error(UndefinedValueError, path, ERR_MSG_UNDEFINED)

        if kind is ValueKind.RECORD:
            child_refs = self._register(refs, value, path)
            for key, item in value.items():
                next_path = key_path(path, key)
                self._visit_key(key, next_path)
                self.visit(child_refs, item, next_path, depth + 1)
            return True

        if kind is ValueKind.SEQUENCE:
            child_refs = self._register(refs, value, path)
            for index, item in enumerate(value):
                self.visit(child_refs, item, index_path(path, index), depth + 1)
            return True

        tag = type_tag(value)
        detail = f' ("{runtime_tag(value)}")' if tag == "object" else ""
        raise self._error(
            UnsupportedTypeError,
            path,
            f"`{tag}`{detail} {ERR_MSG_UNSUPPORTED_TYPE}",
            f"value {reprlib.repr(value)} of type {runtime_tag(value)}",
        )

    def _apply_hook(self, value: Any, path: str) -> Any:
        """Swap ``value`` for its ``to_json()`` result, once, if it has one."""
        if not has_transform_hook(value):
            return value
        try:
            return value.to_json()
        except Exception as error:
            raise self._error(
                HookInvocationError,
                path,
                f"Error encountered while calling `{TRANSFORM_HOOK_NAME}()`: {error}",
                f"{type(error).__name__} raised by {runtime_tag(value)}.{TRANSFORM_HOOK_NAME}()",
                wrapped=error,
            ) from error

    def _visit_key(self, key: Any, path: str) -> None:
        # Only str keys survive a round trip; json.dumps would coerce the rest.
        if isinstance(key, str):
            return
        raise self._error(
            UnsupportedTypeError,
            path,
            f"`{runtime_tag(key)}` {ERR_MSG_UNSUPPORTED_KEY}",
            f"key {reprlib.repr(key)} of type {runtime_tag(key)}",
        )

    def _register(self, refs: Refs, value: Any, path: str) -> Refs:
        """Return a new record with ``value`` added; reject it if already present."""
        ident = id(value)
        if ident in refs:
            first_seen = refs[ident]
            raise self._error(
                CircularReferenceError,
                path,
                "Circular references cannot be expressed in JSON "
                f"(first seen at `{first_seen or '(root)'}`).",
                f"{runtime_tag(value)} at {path} first seen at {first_seen!r}",
                first_seen_path=first_seen,
            )
        return {**refs, ident: path}

    def _error(
        self,
        cls: type[SerializableError],
        path: str,
        reason: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        **extra: Any,
    ) -> SerializableError:
        error = cls(
            self._subject,
            self._operation,
            path,
            reason,
            internal_details,
            wrapped,
            subject_kind=self._subject_kind,
            **extra,
        )
        logger.debug(
            "serializability check failed for %s (%s) at %r: %s",
            self._subject,
            self._operation,
            path,
            error.internal(),
        )
        return error
