# tests/conftest.py
from __future__ import annotations
import pytest

from greeter.common import settings as s


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # settings are cached process-wide; keep each test isolated from the host env
    for key in ("GREETER_APP_NAME", "GREETER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()
