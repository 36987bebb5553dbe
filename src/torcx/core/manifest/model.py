"""Versioned manifest data model.

Every document torcx reads or writes is an envelope ``{"kind", "value"}``
where ``kind`` names the schema version of ``value``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List

PROFILE_MANIFEST_V0_KIND = "profile-manifest-v0"
IMAGE_MANIFEST_V0_KIND = "image-manifest-v0"


class ImageFormat(str, Enum):
    """Archive format of an image."""

    TGZ = "tgz"
    SQUASHFS = "squashfs"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Image:
    """An addon name plus the reference (version/tag) to activate.

    An empty ``reference`` in a user profile is a tombstone: it removes the
    image of the same name inherited from the vendor profiles.
    """

    name: str
    reference: str
    format: ImageFormat = ImageFormat.TGZ

    @property
    def is_tombstone(self) -> bool:
        return self.reference == ""


@dataclass
class Images:
    """Ordered list of images; ``name`` is the merge key."""

    images: List[Image] = field(default_factory=list)

    def __iter__(self):
        return iter(self.images)

    def __len__(self) -> int:
        return len(self.images)

    def names(self) -> List[str]:
        return [image.name for image in self.images]


@dataclass
class ProfileManifest:
    """``profile-manifest-v0`` envelope."""

    value: Images = field(default_factory=Images)
    kind: str = PROFILE_MANIFEST_V0_KIND


@dataclass
class Assets:
    """Relative paths an image propagates onto the host."""

    binaries: List[str] = field(default_factory=list)
    network: List[str] = field(default_factory=list)
    units: List[str] = field(default_factory=list)
    sysusers: List[str] = field(default_factory=list)
    tmpfiles: List[str] = field(default_factory=list)


@dataclass
class ImageManifest:
    """``image-manifest-v0`` envelope."""

    value: Assets = field(default_factory=Assets)
    kind: str = IMAGE_MANIFEST_V0_KIND


@dataclass(frozen=True)
class Archive:
    """An image resolved to its ``.torcx.tgz``/``.torcx.squashfs`` file on disk."""

    image: Image
    filepath: Path

    @property
    def name(self) -> str:
        return self.image.name

    @property
    def reference(self) -> str:
        return self.image.reference

    @property
    def format(self) -> ImageFormat:
        return self.image.format


__all__ = [
    "PROFILE_MANIFEST_V0_KIND",
    "IMAGE_MANIFEST_V0_KIND",
    "ImageFormat",
    "Image",
    "Images",
    "ProfileManifest",
    "Assets",
    "ImageManifest",
    "Archive",
]
