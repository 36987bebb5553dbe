"""
torcx configuration loading.

Configuration sources (highest to lowest priority):
1. Environment variables: TORCX_BASE_DIR, TORCX_RUN_DIR, TORCX_CONF_DIR,
   TORCX_STORE_PATHS (colon separated)
2. A ``torcx-config-v0`` JSON document, when a path is given
3. Bundled defaults: torcx.data/config/defaults.yaml
"""
from __future__ import annotations

import logging
import os
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from torcx.core.exceptions import ConfigError
from torcx.core.schemas import SchemaValidationError, validate_payload
from torcx.core.utils.io import PathLike, read_json, read_yaml
from torcx.core.utils.merge import deep_merge
from torcx.data import get_data_path

from .model import COMMON_CONFIG_V0_KIND, CommonConfig

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "TORCX_BASE_DIR": "base_dir",
    "TORCX_RUN_DIR": "run_dir",
    "TORCX_CONF_DIR": "conf_dir",
    "TORCX_STORE_PATHS": "store_paths",
}


def load_config_document(path: PathLike) -> Dict[str, Any]:
    """Read a ``torcx-config-v0`` document and return its ``value``.

    Raises:
        ConfigError: If the file is unreadable, malformed, or of another kind.
    """
    try:
        data = read_json(path)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"cannot load config {path}: {exc}", context={"path": str(path)}) from exc

    kind = data.get("kind") if isinstance(data, dict) else None
    if kind != COMMON_CONFIG_V0_KIND:
        raise ConfigError(
            f"unexpected config kind {kind!r}, expected {COMMON_CONFIG_V0_KIND!r}",
            context={"path": str(path)},
        )
    try:
        validate_payload(data, COMMON_CONFIG_V0_KIND)
    except SchemaValidationError as exc:
        raise ConfigError(str(exc), context={"path": str(path), "errors": exc.errors}) from exc
    return dict(data.get("value") or {})


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for var, key in ENV_OVERRIDES.items():
        raw = environ.get(var)
        if raw is None or raw.strip() == "":
            continue
        if key == "store_paths":
            overrides[key] = [p for p in raw.split(":") if p]
        else:
            overrides[key] = raw.strip()
    return overrides


def load_settings(
    config_path: Optional[PathLike] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Return the merged settings dict (``torcx`` and ``profiles`` sections).

    ``overrides`` is merged last, above the environment.
    """
    cfg = read_yaml(get_data_path("config", "defaults.yaml"), default={}, raise_on_error=True)

    if config_path is not None:
        cfg = deep_merge(cfg, {"torcx": load_config_document(config_path)})
        logger.debug("Merged config document %s", config_path)

    env = _env_overrides(os.environ if environ is None else environ)
    if env:
        logger.debug("Applying environment overrides: %s", ", ".join(sorted(env)))
        cfg = deep_merge(cfg, {"torcx": env})
    if overrides:
        cfg = deep_merge(cfg, overrides)
    return cfg


class TorcxConfig:
    """Typed accessors over the merged settings.

    Usage:
        cfg = TorcxConfig(config_path=Path("/etc/torcx/config.json"))
        cfg.common.run_profile_path
    """

    def __init__(
        self,
        config_path: Optional[PathLike] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._config = load_settings(config_path, environ=environ, overrides=overrides)

    def _section(self, name: str) -> Dict[str, Any]:
        return self._config.get(name, {}) or {}

    @cached_property
    def common(self) -> CommonConfig:
        section = self._section("torcx")
        missing = [key for key in ("base_dir", "run_dir", "conf_dir") if not section.get(key)]
        if missing:
            raise ConfigError(f"missing configuration keys: {', '.join(missing)}")
        return CommonConfig(
            base_dir=Path(section["base_dir"]),
            run_dir=Path(section["run_dir"]),
            conf_dir=Path(section["conf_dir"]),
            store_paths=tuple(Path(p) for p in section.get("store_paths") or []),
        )

    @cached_property
    def vendor_profile_dirs(self) -> List[Path]:
        """Vendor profile directories, low to high precedence."""
        section = self._section("profiles")
        return [Path(section[key]) for key in ("vendor_dir", "oem_dir") if section.get(key)]

    @cached_property
    def profile_dirs(self) -> List[Path]:
        """All profile directories, low to high precedence; user profiles last."""
        return [*self.vendor_profile_dirs, self.common.user_profile_dir]

    @cached_property
    def lower_profile_names(self) -> List[str]:
        return list(self._section("profiles").get("lower_profile_names") or [])


def load_common_config(
    config_path: Optional[PathLike] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> CommonConfig:
    """Shortcut for ``TorcxConfig(...).common``."""
    return TorcxConfig(config_path, environ=environ).common


__all__ = [
    "ENV_OVERRIDES",
    "TorcxConfig",
    "load_common_config",
    "load_config_document",
    "load_settings",
]
