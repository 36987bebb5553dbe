"""Read and write versioned manifest documents.

Decoding is all-or-nothing: a manifest is returned only when the envelope
kind matches, the document passes its schema, and every image ``format``
is recognized. Failures are reported as :class:`ManifestIOError` (the path
could not be read or written) or :class:`ManifestParseError` (the content
is not a valid manifest), both carrying the path and underlying cause.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from torcx.core.exceptions import ImageFormatError, ManifestIOError, ManifestParseError
from torcx.core.schemas import SchemaValidationError, validate_payload
from torcx.core.utils.io import PathLike, read_json, write_json

from .formats import parse_image_format
from .model import (
    IMAGE_MANIFEST_V0_KIND,
    PROFILE_MANIFEST_V0_KIND,
    Assets,
    Image,
    ImageFormat,
    ImageManifest,
    Images,
    ProfileManifest,
)

logger = logging.getLogger(__name__)

# JSON key -> Assets attribute, in serialization order.
_ASSET_FIELDS = (
    ("bin", "binaries"),
    ("network", "network"),
    ("units", "units"),
    ("sysusers", "sysusers"),
    ("tmpfiles", "tmpfiles"),
)


def _check_envelope(data: Any, kind: str, path: Optional[PathLike]) -> None:
    if not isinstance(data, dict):
        raise ManifestParseError(
            f"{kind}: expected a JSON object, got {type(data).__name__}",
            path=path,
            cause="not an object",
        )
    found = data.get("kind")
    if found != kind:
        raise ManifestParseError(
            f"unexpected manifest kind {found!r}, expected {kind!r}",
            path=path,
            cause=f"kind mismatch: {found!r}",
        )
    try:
        validate_payload(data, kind)
    except SchemaValidationError as exc:
        raise ManifestParseError(str(exc), path=path, cause="; ".join(exc.errors)) from exc


def _read_document(path: PathLike) -> Any:
    try:
        return read_json(path)
    except OSError as exc:
        raise ManifestIOError(
            f"cannot read manifest {path}: {exc.strerror or exc}",
            path=path,
            cause=str(exc),
        ) from exc
    except (ValueError, RecursionError) as exc:
        # json.JSONDecodeError, UnicodeDecodeError, or nesting too deep
        raise ManifestParseError(
            f"malformed manifest {path}: {exc}",
            path=path,
            cause=str(exc),
        ) from exc


def _write_document(path: PathLike, mode: int, data: Dict[str, Any]) -> None:
    try:
        write_json(path, data, mode=mode)
    except OSError as exc:
        raise ManifestIOError(
            f"cannot write manifest {path}: {exc.strerror or exc}",
            path=path,
            cause=str(exc),
        ) from exc


def decode_profile(data: Any, *, path: Optional[PathLike] = None) -> ProfileManifest:
    """Decode a parsed ``profile-manifest-v0`` document.

    ``path`` is only used for error reporting.

    Raises:
        ManifestParseError: On any structural, kind or format error.
    """
    _check_envelope(data, PROFILE_MANIFEST_V0_KIND, path)

    entries = (data.get("value") or {}).get("images") or []
    images: List[Image] = []
    for idx, entry in enumerate(entries):
        try:
            fmt = parse_image_format(entry.get("format"))
        except ImageFormatError as exc:
            raise ManifestParseError(
                f"image #{idx} ({entry['name']!r}): {exc}",
                path=path,
                cause=str(exc),
            ) from exc
        images.append(Image(name=entry["name"], reference=entry["reference"], format=fmt))

    return ProfileManifest(kind=PROFILE_MANIFEST_V0_KIND, value=Images(images))


def encode_profile(manifest: ProfileManifest) -> Dict[str, Any]:
    """Return the canonical JSON shape of ``manifest``.

    ``format`` is always written, so decoding the result reproduces
    ``manifest`` exactly.
    """
    return {
        "kind": manifest.kind,
        "value": {
            "images": [
                {
                    "name": image.name,
                    "reference": image.reference,
                    "format": ImageFormat(image.format).value,
                }
                for image in manifest.value.images
            ],
        },
    }


def load_profile(path: PathLike) -> ProfileManifest:
    """Read and decode the profile manifest at ``path``.

    Raises:
        ManifestIOError: If ``path`` is missing or unreadable.
        ManifestParseError: If the content is not a valid profile manifest.
    """
    manifest = decode_profile(_read_document(path), path=path)
    logger.debug("Loaded profile %s (%d images)", path, len(manifest.value))
    return manifest


def save_profile(path: PathLike, mode: int, manifest: ProfileManifest) -> None:
    """Encode ``manifest`` and write it to ``path`` with permission bits ``mode``.

    The file is written in place; callers needing crash safety write to a
    temporary path and rename it over the target.

    Raises:
        ManifestIOError: On any write error.
    """
    _write_document(path, mode, encode_profile(manifest))
    logger.debug("Wrote profile %s (%d images, mode %o)", path, len(manifest.value), mode)


def decode_image_manifest(data: Any, *, path: Optional[PathLike] = None) -> ImageManifest:
    """Decode a parsed ``image-manifest-v0`` document."""
    _check_envelope(data, IMAGE_MANIFEST_V0_KIND, path)

    value = data.get("value") or {}
    assets = Assets(**{attr: list(value.get(key) or []) for key, attr in _ASSET_FIELDS})
    return ImageManifest(kind=IMAGE_MANIFEST_V0_KIND, value=assets)


def encode_image_manifest(manifest: ImageManifest) -> Dict[str, Any]:
    """Return the JSON shape of ``manifest``; empty asset lists are omitted."""
    value: Dict[str, List[str]] = {}
    for key, attr in _ASSET_FIELDS:
        paths = getattr(manifest.value, attr)
        if paths:
            value[key] = list(paths)
    return {"kind": manifest.kind, "value": value}


def load_image_manifest(path: PathLike) -> ImageManifest:
    """Read and decode the image manifest at ``path``.

    Raises:
        ManifestIOError: If ``path`` is missing or unreadable.
        ManifestParseError: If the content is not a valid image manifest.
    """
    manifest = decode_image_manifest(_read_document(path), path=path)
    logger.debug("Loaded image manifest %s", path)
    return manifest


def save_image_manifest(path: PathLike, mode: int, manifest: ImageManifest) -> None:
    """Encode ``manifest`` and write it to ``path`` with permission bits ``mode``."""
    _write_document(Path(path), mode, encode_image_manifest(manifest))


__all__ = [
    "decode_profile",
    "encode_profile",
    "load_profile",
    "save_profile",
    "decode_image_manifest",
    "encode_image_manifest",
    "load_image_manifest",
    "save_image_manifest",
]
