"""Profile merging and resolution.

Default stack (low -> high precedence):
  vendor profiles (folded left to right) -> user profile
"""
from __future__ import annotations

from .merge import merge_images, merge_layers
from .resolver import (
    apply_profile,
    build_apply_config,
    build_profile_config,
    list_profiles,
    profile_path,
    read_next_profile,
    resolve_profile,
    validate_profile_name,
    write_next_profile,
)

__all__ = [
    "merge_images",
    "merge_layers",
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
