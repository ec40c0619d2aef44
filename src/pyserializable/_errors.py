"""Exception hierarchy for JSON serializability checks."""

from __future__ import annotations

import enum
from typing import Any

from pyserializable._constants import DEFAULT_SUBJECT_KIND


class ErrorKind(enum.StrEnum):
    NOT_A_PLAIN_OBJECT = "not_a_plain_object"
    UNDEFINED_VALUE = "undefined_value"
    CIRCULAR_REFERENCE = "circular_reference"
    UNSUPPORTED_TYPE = "unsupported_type"
    HOOK_INVOCATION_FAILED = "hook_invocation_failed"
    MAX_DEPTH_EXCEEDED = "max_depth_exceeded"


class SerializableError(Exception):
    """Base exception for values that cannot be expressed as JSON.

    Provides dual messaging: a rendered user-facing message locating the
    offending value, and internal details (types, reprs) for logging.
    """

    kind: ErrorKind | None = None

    def __init__(
        self,
        subject: str,
        operation: str,
        path: str,
        reason: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        subject_kind: str = DEFAULT_SUBJECT_KIND,
    ) -> None:
        self.subject = subject
        self.operation = operation
        self.path = path
        self.reason = reason
        self.subject_kind = subject_kind
        self.user_message = render_message(
            subject, operation, path, reason, subject_kind=subject_kind
        )
        self.internal_details = internal_details or reason
        self.wrapped = wrapped
        super().__init__(self.user_message)

    def __reduce__(self) -> tuple[Any, ...]:
        # args only holds the rendered message; rebuild from the fields instead.
        return (
            self.__class__,
            (
                self.subject,
                self.operation,
                self.path,
                self.reason,
                self.internal_details,
                self.wrapped,
            ),
            self.__dict__,
        )

    def internal(self) -> str:
        return self.internal_details


def render_message(
    subject: str,
    operation: str,
    path: str,
    reason: str,
    *,
    subject_kind: str = DEFAULT_SUBJECT_KIND,
) -> str:
    """Render the user-facing message for a failed check.

    A root-level failure names the subject kind; anything deeper names the
    path to the offending value.
    """
    if path:
        return (
            f"Error serializing `{path}` returned from `{operation}` "
            f'in "{subject}".\nReason: {reason}'
        )
    return (
        f"Error serializing {subject_kind} returned from `{operation}` "
        f'in "{subject}".\nReason: {reason}'
    )


class NotAPlainObjectError(SerializableError):
    """Raised when the root value is not a plain ``dict``."""

    kind = ErrorKind.NOT_A_PLAIN_OBJECT


class UndefinedValueError(SerializableError):
    """Raised when ``UNDEFINED`` appears anywhere in the value."""

    kind = ErrorKind.UNDEFINED_VALUE


class CircularReferenceError(SerializableError):
    """Raised when a dict or list contains itself along the current path."""

    kind = ErrorKind.CIRCULAR_REFERENCE

    def __init__(self, *args: Any, first_seen_path: str = "", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.first_seen_path = first_seen_path


class UnsupportedTypeError(SerializableError):
    """Raised when a value's type has no JSON equivalent."""

    kind = ErrorKind.UNSUPPORTED_TYPE


class HookInvocationError(SerializableError):
    """Raised when a value's ``to_json()`` hook raises."""

    kind = ErrorKind.HOOK_INVOCATION_FAILED


class MaxDepthExceededError(SerializableError):
    """Raised when nesting exceeds the configured ``max_depth``."""

    kind = ErrorKind.MAX_DEPTH_EXCEEDED


# User-facing reason message constants
ERR_MSG_UNDEFINED = (
    "`undefined` cannot be serialized as JSON. "
    "Please use `None` or omit this value."
)
ERR_MSG_UNSUPPORTED_TYPE = (
    "cannot be serialized as JSON. Please only return JSON serializable data types."
)
ERR_MSG_UNSUPPORTED_KEY = "keys cannot be serialized as JSON. Please use string keys."
ERR_MSG_MAX_DEPTH_EXCEEDED = "maximum nesting depth exceeded"
