"""Profile merge engine.

Vendor ("lower") profiles are folded left to right, then the user
("upper") profile is folded on top. Each fold uses :func:`merge_images`:

- images only in lower keep their relative order;
- every image named in upper replaces the lower image of the same name
  and follows the untouched lower images, in upper order;
- an upper image with an empty reference is a tombstone: it removes the
  lower image of that name and is not itself part of the result.

Within one layer a repeated name collapses to its last entry; the first
occurrence fixes its position.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from torcx.core.manifest.model import Image, Images

logger = logging.getLogger(__name__)


def merge_images(lower: Images, upper: Images) -> Images:
    """Overlay ``upper`` on ``lower`` and return the effective images.

    Pure and total: inputs are never mutated and every pair of decoded
    ``Images`` yields a result.

    Example:
        >>> lower = Images([Image("foo2", "3"), Image("foo1", "1")])
        >>> merge_images(lower, Images([Image("foo2", "2")])).names()
        ['foo1', 'foo2']
    """
    # dicts keep insertion order; re-inserting after a pop appends.
    merged: Dict[str, Image] = {}
    for image in lower.images:
        merged[image.name] = image

    for image in upper.images:
        previous = merged.pop(image.name, None)
        if image.is_tombstone:
            if previous is not None:
                logger.debug("Removed image %s:%s", previous.name, previous.reference)
            continue
        if previous is not None and previous != image:
            logger.debug(
                "Overrode image %s:%s with %s:%s",
                previous.name,
                previous.reference,
                image.name,
                image.reference,
            )
        merged[image.name] = image

    return Images(list(merged.values()))


def merge_layers(lowers: Iterable[Images], upper: Images) -> Images:
    """Fold ``lowers`` left to right, then fold ``upper`` on top.

    Each lower layer is collapsed on its own first, so a name repeated
    inside one vendor layer keeps the position of its first occurrence.
    """
    effective = Images()
    for lower in lowers:
        effective = merge_images(effective, merge_images(lower, Images()))
    return merge_images(effective, upper)


__all__ = ["merge_images", "merge_layers"]
