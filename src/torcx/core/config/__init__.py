"""Configuration for torcx.

Bundled defaults, an optional ``torcx-config-v0`` document and TORCX_*
environment overrides are merged into typed configuration bags.
"""
from __future__ import annotations

from .manager import (
    ENV_OVERRIDES,
    TorcxConfig,
    load_common_config,
    load_config_document,
    load_settings,
)
from .model import (
    COMMON_CONFIG_V0_KIND,
    PROFILE_SUFFIX,
    ApplyConfig,
    CommonConfig,
    ProfileConfig,
)

__all__ = [
    "COMMON_CONFIG_V0_KIND",
    "PROFILE_SUFFIX",
    "CommonConfig",
    "ApplyConfig",
    "ProfileConfig",
    "ENV_OVERRIDES",
    "TorcxConfig",
    "load_common_config",
    "load_config_document",
    "load_settings",
]
