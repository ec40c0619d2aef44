"""Limits and defaults for JSON serializability checks."""

MAX_SAFE_INTEGER = 2**53 - 1
"""Largest integer a JSON consumer can represent exactly as a double."""

DEFAULT_SUBJECT_KIND = "props"
"""Noun used for the root value in rendered messages."""

TRANSFORM_HOOK_NAME = "to_json"
"""Zero-argument method a value may expose to supply a JSON-ready substitute."""
