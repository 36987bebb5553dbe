from __future__ import annotations

import pytest

import torcx.core.schemas
from torcx.core.schemas import SchemaValidationError, load_schema, validate_payload


@pytest.mark.parametrize("kind", ["profile-manifest-v0", "image-manifest-v0", "torcx-config-v0"])
def test_bundled_schemas_load(kind: str) -> None:
    schema = load_schema(kind)
    assert schema["title"] == kind


def test_unknown_schema() -> None:
    with pytest.raises(FileNotFoundError):
        load_schema("no-such-kind-v0")


def test_validate_payload_collects_errors() -> None:
    payload = {"kind": "profile-manifest-v0", "value": {"images": [{"name": 3}]}}

    with pytest.raises(SchemaValidationError) as excinfo:
        validate_payload(payload, "profile-manifest-v0")

    errors = excinfo.value.errors
    assert len(errors) == 2
    assert all(e.startswith("value.images.0") for e in errors)
    assert "; ".join(errors) in str(excinfo.value)


def test_valid_payload() -> None:
    validate_payload({"kind": "image-manifest-v0", "value": {"bin": ["/bin/x"]}}, "image-manifest-v0")


def test_public_api() -> None:
    assert sorted(torcx.core.schemas.__all__) == ["SchemaValidationError", "load_schema", "validate_payload"]
