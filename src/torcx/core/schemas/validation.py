"""Shared schema validation utilities.

Schemas are JSON Schema documents stored as YAML under
``torcx.data/schemas/`` and named after the document kind they describe,
e.g. ``profile-manifest-v0.schema.yaml``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from torcx.core.utils.io import read_yaml
from torcx.data import get_data_path


class SchemaValidationError(ValueError):
    """Raised when schema validation fails.

    ``errors`` holds one readable message per violation.
    """

    def __init__(self, message: str, errors: List[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


@lru_cache(maxsize=16)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Automatically appends ``.schema.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If the schema is not bundled.
        ValueError: If the schema file is not a YAML mapping.
    """
    filename = schema_name if schema_name.endswith(".yaml") else f"{schema_name}.schema.yaml"
    schema_path = get_data_path("schemas", filename)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name} ({schema_path})")

    schema = read_yaml(schema_path, default=None, raise_on_error=True)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


@lru_cache(maxsize=16)
def _validator(schema_name: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(schema_name))


def _collect_errors(payload: Any, schema_name: str) -> List[str]:
    """One message per violation, ordered by location; empty if valid."""
    errors: List[str] = []
    for error in sorted(_validator(schema_name).iter_errors(payload), key=lambda e: list(map(str, e.path))):
        if error.path:
            path_str = ".".join(str(p) for p in error.path)
            errors.append(f"{path_str}: {error.message}")
        else:
            errors.append(error.message)
    return errors


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate a payload against a bundled JSON schema.

    Raises:
        SchemaValidationError: If validation fails.
        FileNotFoundError: If schema doesn't exist.
    """
    errors = _collect_errors(payload, schema_name)
    if errors:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': {'; '.join(errors)}",
            errors,
        )


__all__ = [
    "load_schema",
    "validate_payload",
    "SchemaValidationError",
]
