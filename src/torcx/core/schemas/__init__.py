"""Schema validation utilities for torcx.

JSON schemas for every versioned document kind are bundled with the package
and loaded in a single, consistent way.
"""
from __future__ import annotations

from .validation import (
    SchemaValidationError,
    load_schema,
    validate_payload,
)

__all__ = [
    "load_schema",
    "validate_payload",
    "SchemaValidationError",
]
