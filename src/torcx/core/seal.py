"""Seal vocabulary.

The seal is the fixed set of names under which the resolved profile state
is handed to downstream processes. The core only builds the mapping;
exporting it is left to the caller.
"""
from __future__ import annotations

from typing import Dict

from torcx.core.config.model import ApplyConfig

SEAL_UPPER_PROFILE = "TORCX_UPPER_PROFILE"
SEAL_LOWER_PROFILES = "TORCX_LOWER_PROFILES"
SEAL_RUN_PROFILE_PATH = "TORCX_PROFILE_PATH"
SEAL_BINDIR = "TORCX_BINDIR"
SEAL_UNPACKDIR = "TORCX_UNPACKDIR"

SEAL_KEYS = (
    SEAL_UPPER_PROFILE,
    SEAL_LOWER_PROFILES,
    SEAL_RUN_PROFILE_PATH,
    SEAL_BINDIR,
    SEAL_UNPACKDIR,
)


def build_seal(apply_config: ApplyConfig) -> Dict[str, str]:
    """Return the seal values for ``apply_config``, keyed by seal name.

    The lower profile paths are joined with ``:``; a missing upper profile
    is the empty string.
    """
    common = apply_config.common
    upper = apply_config.upper_profile
    return {
        SEAL_UPPER_PROFILE: upper.stem if upper is not None else "",
        SEAL_LOWER_PROFILES: ":".join(str(p) for p in apply_config.lower_profiles),
        SEAL_RUN_PROFILE_PATH: str(common.run_profile_path),
        SEAL_BINDIR: str(common.bin_dir),
        SEAL_UNPACKDIR: str(common.unpack_dir),
    }


__all__ = [
    "SEAL_UPPER_PROFILE",
    "SEAL_LOWER_PROFILES",
    "SEAL_RUN_PROFILE_PATH",
    "SEAL_BINDIR",
    "SEAL_UNPACKDIR",
    "SEAL_KEYS",
    "build_seal",
]
