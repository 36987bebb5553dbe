"""Runtime configuration bags.

These only say *where* things live; deciding *what* is active is the job
of the profile resolver.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

COMMON_CONFIG_V0_KIND = "torcx-config-v0"

PROFILE_SUFFIX = ".json"


@dataclass(frozen=True)
class CommonConfig:
    """Configuration shared by every torcx operation."""

    base_dir: Path
    run_dir: Path
    conf_dir: Path
    store_paths: tuple[Path, ...] = ()

    @property
    def bin_dir(self) -> Path:
        """Directory holding binaries propagated from unpacked images."""
        return self.run_dir / "bin"

    @property
    def unpack_dir(self) -> Path:
        return self.run_dir / "unpack"

    @property
    def run_profile_path(self) -> Path:
        """Where the effective profile of the current boot is written."""
        return self.run_dir / "profile.json"

    @property
    def user_profile_dir(self) -> Path:
        return self.conf_dir / "profiles"

    @property
    def next_profile_path(self) -> Path:
        """File naming the user profile to apply on next boot."""
        return self.conf_dir / "next-profile"

    def user_profile_path(self, name: str) -> Path:
        return self.user_profile_dir / f"{name}{PROFILE_SUFFIX}"


@dataclass(frozen=True)
class ApplyConfig:
    """Inputs for resolving and persisting the effective profile."""

    common: CommonConfig
    lower_profiles: List[Path] = field(default_factory=list)
    upper_profile: Optional[Path] = None


@dataclass(frozen=True)
class ProfileConfig:
    """Inputs for inspecting and selecting profiles."""

    common: CommonConfig
    lower_profile_names: List[str] = field(default_factory=list)
    user_profile_name: Optional[str] = None
    current_profile_path: Optional[Path] = None
    next_profile: Optional[str] = None


__all__ = [
    "COMMON_CONFIG_V0_KIND",
    "PROFILE_SUFFIX",
    "CommonConfig",
    "ApplyConfig",
    "ProfileConfig",
]
