"""Versioned manifest model and codec.

- model: images, profiles and asset manifests
- formats: image format discriminator and archive suffixes
- codec: JSON decode/encode and file load/save
"""
from __future__ import annotations

from .codec import (
    decode_image_manifest,
    decode_profile,
    encode_image_manifest,
    encode_profile,
    load_image_manifest,
    load_profile,
    save_image_manifest,
    save_profile,
)
from .formats import archive_filename, file_suffix, parse_image_format
from .model import (
    IMAGE_MANIFEST_V0_KIND,
    PROFILE_MANIFEST_V0_KIND,
    Archive,
    Assets,
    Image,
    ImageFormat,
    ImageManifest,
    Images,
    ProfileManifest,
)

__all__ = [
    # model
    "PROFILE_MANIFEST_V0_KIND",
    "IMAGE_MANIFEST_V0_KIND",
    "ImageFormat",
    "Image",
    "Images",
    "ProfileManifest",
    "Assets",
    "ImageManifest",
    "Archive",
    # formats
    "parse_image_format",
    "file_suffix",
    "archive_filename",
    # codec
    "decode_profile",
    "encode_profile",
    "load_profile",
    "save_profile",
    "decode_image_manifest",
    "encode_image_manifest",
    "load_image_manifest",
    "save_image_manifest",
]
