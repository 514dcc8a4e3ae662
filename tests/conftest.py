import pytest

from magicsquare.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("ORDER", "FORMAT", "DEFAULT_STYLE", "TABLE_CLASS", "LOG_LEVEL"):
        monkeypatch.delenv(ENV_PREFIX + key, raising=False)
