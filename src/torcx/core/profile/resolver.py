"""Locate profiles on disk and resolve the effective profile.

Profiles are ``<name>.json`` files in an ordered list of directories:
vendor directories first, the user profile directory last. The user
selects the upper profile by writing its name to the next-profile file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from torcx.core.config.manager import TorcxConfig
from torcx.core.config.model import PROFILE_SUFFIX, ApplyConfig, CommonConfig, ProfileConfig
from torcx.core.exceptions import ManifestIOError, ProfileNotFoundError
from torcx.core.manifest.codec import encode_profile, load_profile
from torcx.core.manifest.model import Images, ProfileManifest
from torcx.core.utils.io import atomic_write, write_json_atomic

from .merge import merge_layers

logger = logging.getLogger(__name__)


def validate_profile_name(name: str) -> str:
    """Return ``name`` stripped, or raise ValueError if it cannot name a profile file."""
    cleaned = (name or "").strip()
    if not cleaned or "/" in cleaned or cleaned in (".", ".."):
        raise ValueError(f"invalid profile name {name!r}")
    return cleaned


def list_profiles(dirs: Iterable[Path]) -> Dict[str, Path]:
    """Map profile names to paths across ``dirs`` (low to high precedence).

    A profile in a later directory shadows one of the same name in an
    earlier directory. Missing directories are skipped.
    """
    profiles: Dict[str, Path] = {}
    for directory in dirs:
        d = Path(directory)
        if not d.is_dir():
            continue
        for path in sorted(d.glob(f"*{PROFILE_SUFFIX}")):
            if path.is_file():
                profiles[path.name[: -len(PROFILE_SUFFIX)]] = path
    return profiles


def profile_path(name: str, dirs: Iterable[Path]) -> Path:
    """Return the path of profile ``name``.

    Raises:
        ProfileNotFoundError: If no directory holds the profile.
    """
    dirs = list(dirs)
    found = list_profiles(dirs).get(name)
    if found is None:
        raise ProfileNotFoundError(
            f"profile {name!r} not found",
            context={"profile": name, "searched": [str(d) for d in dirs]},
        )
    return found


def read_next_profile(common: CommonConfig) -> Optional[str]:
    """Return the user profile selected for next boot, or None if unset."""
    path = common.next_profile_path
    try:
        content = path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None
    return content or None


def write_next_profile(common: CommonConfig, name: str, *, mode: int = 0o644) -> Path:
    """Select user profile ``name`` for next boot.

    The profile must already exist in the user profile directory.
    """
    name = validate_profile_name(name)
    profile_path(name, [common.user_profile_dir])

    path = common.next_profile_path
    atomic_write(path, lambda f: f.write(f"{name}\n"), mode=mode)
    logger.info("Next profile set to %s", name)
    return path


def build_apply_config(cfg: TorcxConfig, upper_profile_name: Optional[str] = None) -> ApplyConfig:
    """Turn profile names into the paths an apply run reads.

    Lower profile names missing from every vendor directory are skipped.
    The upper profile defaults to the next-profile selection; when one is
    named it must exist in the user profile directory.
    """
    common = cfg.common
    vendor = list_profiles(cfg.vendor_profile_dirs)

    lowers: List[Path] = []
    for name in cfg.lower_profile_names:
        path = vendor.get(name)
        if path is None:
            logger.debug("Lower profile %s not present, skipping", name)
            continue
        lowers.append(path)

    if upper_profile_name is None:
        upper_profile_name = read_next_profile(common)
    upper: Optional[Path] = None
    if upper_profile_name:
        upper = profile_path(validate_profile_name(upper_profile_name), [common.user_profile_dir])

    return ApplyConfig(common=common, lower_profiles=lowers, upper_profile=upper)


def build_profile_config(cfg: TorcxConfig) -> ProfileConfig:
    """Describe the current profile selection."""
    common = cfg.common
    next_profile = read_next_profile(common)
    current = common.run_profile_path
    return ProfileConfig(
        common=common,
        lower_profile_names=list(cfg.lower_profile_names),
        user_profile_name=next_profile,
        current_profile_path=current if current.exists() else None,
        next_profile=next_profile,
    )


def resolve_profile(apply_config: ApplyConfig) -> Images:
    """Load every configured profile and merge them into the effective images.

    Raises:
        ManifestIOError: If a configured profile cannot be read.
        ManifestParseError: If a configured profile is invalid.
    """
    lowers = [load_profile(path).value for path in apply_config.lower_profiles]
    upper = Images()
    if apply_config.upper_profile is not None:
        upper = load_profile(apply_config.upper_profile).value

    effective = merge_layers(lowers, upper)
    logger.debug(
        "Resolved %d images from %d lower profile(s) and upper %s",
        len(effective),
        len(lowers),
        apply_config.upper_profile,
    )
    return effective


def apply_profile(apply_config: ApplyConfig, *, mode: int = 0o644) -> Images:
    """Resolve the effective profile and persist it to the run profile path.

    The run profile is replaced atomically so readers never observe a
    partial document.
    """
    effective = resolve_profile(apply_config)
    path = apply_config.common.run_profile_path
    try:
        write_json_atomic(path, encode_profile(ProfileManifest(value=effective)), mode=mode)
    except OSError as exc:
        raise ManifestIOError(
            f"cannot write manifest {path}: {exc.strerror or exc}",
            path=path,
            cause=str(exc),
        ) from exc
    logger.info("Applied profile with %d images to %s", len(effective), path)
    return effective


__all__ = [
    "validate_profile_name",
    "list_profiles",
    "profile_path",
    "read_next_profile",
    "write_next_profile",
    "build_apply_config",
    "build_profile_config",
    "resolve_profile",
    "apply_profile",
]
