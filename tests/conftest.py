import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


_SETTINGS_ENV = (
    "PSEUDO_RANDOM_MAX_DEPTH",
    "PSEUDO_RANDOM_STRICT_MAP_KEYS",
    "PSEUDO_RANDOM_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
