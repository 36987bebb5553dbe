"""Image format discriminator.

Profiles written before squashfs support carry no ``format`` field; those
images are tgz archives.
"""
from __future__ import annotations

from typing import Any

from torcx.core.exceptions import ImageFormatError

from .model import Image, ImageFormat


def parse_image_format(raw: Any) -> ImageFormat:
    """Decode the ``format`` field of a single image.

    ``None``, ``""`` and ``"tgz"`` decode to :attr:`ImageFormat.TGZ`,
    ``"squashfs"`` to :attr:`ImageFormat.SQUASHFS`.

    Raises:
        ImageFormatError: For any other value.
    """
    if raw is None or raw == "" or raw == ImageFormat.TGZ.value:
        return ImageFormat.TGZ
    if raw == ImageFormat.SQUASHFS.value:
        return ImageFormat.SQUASHFS
    raise ImageFormatError(
        f"invalid image format {raw!r}: must be one of "
        f"{ImageFormat.TGZ.value!r}, {ImageFormat.SQUASHFS.value!r}",
        context={"format": raw},
    )


def file_suffix(fmt: ImageFormat) -> str:
    """Return the file extension an archive of format ``fmt`` must have."""
    return f".torcx.{ImageFormat(fmt).value}"


def archive_filename(image: Image) -> str:
    """Return the store file name for ``image``: ``<name>:<reference><suffix>``."""
    return f"{image.name}:{image.reference}{file_suffix(image.format)}"


__all__ = ["parse_image_format", "file_suffix", "archive_filename"]
