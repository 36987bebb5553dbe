from __future__ import annotations

import pytest

from torcx.core.exceptions import ImageFormatError
from torcx.core.manifest import Image, ImageFormat, archive_filename, file_suffix, parse_image_format


@pytest.mark.parametrize("raw", [None, "", "tgz"])
def test_missing_or_tgz_format_defaults_to_tgz(raw) -> None:
    assert parse_image_format(raw) is ImageFormat.TGZ


def test_squashfs_format() -> None:
    assert parse_image_format("squashfs") is ImageFormat.SQUASHFS


@pytest.mark.parametrize("raw", ["zip", "TGZ", " tgz", "squash", 0, ["tgz"]])
def test_unknown_format_is_rejected(raw) -> None:
    with pytest.raises(ImageFormatError) as excinfo:
        parse_image_format(raw)

    assert isinstance(excinfo.value, ValueError)
    assert "'tgz'" in str(excinfo.value)
    assert "'squashfs'" in str(excinfo.value)


def test_file_suffix() -> None:
    assert file_suffix(ImageFormat.TGZ) == ".torcx.tgz"
    assert file_suffix(ImageFormat.SQUASHFS) == ".torcx.squashfs"


def test_archive_filename() -> None:
    assert archive_filename(Image("docker", "17.09")) == "docker:17.09.torcx.tgz"
    assert archive_filename(Image("rkt", "1.30", ImageFormat.SQUASHFS)) == "rkt:1.30.torcx.squashfs"


def test_image_format_is_a_string() -> None:
    assert ImageFormat.SQUASHFS == "squashfs"
    assert str(ImageFormat.TGZ) == "tgz"
