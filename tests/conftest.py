import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"
FIXTURES_DIR = TESTS_ROOT / "fixtures"

# Make src/ importable as 'torcx'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from torcx.core.config import TorcxConfig  # noqa: E402
from torcx.core.config.manager import ENV_OVERRIDES  # noqa: E402
from torcx.core.log import reset_logging  # noqa: E402


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture(autouse=True)
def _clean_torcx_env(monkeypatch: pytest.MonkeyPatch):
    """Host TORCX_* variables must not leak into config loading."""
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)
    yield
    reset_logging()


@pytest.fixture
def torcx_root(tmp_path: Path) -> Path:
    """Isolated filesystem root with vendor, oem, conf and run directories."""
    for sub in ("vendor/profiles", "oem/profiles", "etc/profiles", "run", "var"):
        (tmp_path / sub).mkdir(parents=True)
    return tmp_path


@pytest.fixture
def torcx_config(torcx_root: Path) -> TorcxConfig:
    """TorcxConfig pointing every directory into ``torcx_root``."""
    return TorcxConfig(
        environ={
            "TORCX_BASE_DIR": str(torcx_root / "var"),
            "TORCX_RUN_DIR": str(torcx_root / "run"),
            "TORCX_CONF_DIR": str(torcx_root / "etc"),
            "TORCX_STORE_PATHS": str(torcx_root / "store"),
        },
        overrides={
            "profiles": {
                "vendor_dir": str(torcx_root / "vendor" / "profiles"),
                "oem_dir": str(torcx_root / "oem" / "profiles"),
            }
        },
    )
