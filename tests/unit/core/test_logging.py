from __future__ import annotations

import logging
from pathlib import Path

from torcx.core.log import LOGGER_NAME, configure_logging, reset_logging
from torcx.core.manifest import ProfileManifest, save_profile


def test_configure_logging_to_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "torcx.log"
    configure_logging(level="DEBUG", log_path=log_path)

    save_profile(tmp_path / "p.json", 0o644, ProfileManifest())
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert "DEBUG torcx.core.manifest.codec: Wrote profile" in content


def test_configure_logging_is_idempotent(tmp_path: Path) -> None:
    logger = configure_logging(level="INFO")
    configure_logging(level="WARNING")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING

    reset_logging()
    assert logger.handlers == []


def test_unknown_level_falls_back_to_info() -> None:
    assert configure_logging(level="chatty").level == logging.INFO
