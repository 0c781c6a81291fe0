from __future__ import annotations

import pytest

from fieldreflect.runtime.config import reset_default_config


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("FIELDREFLECT_CHECK_TYPES", raising=False)
    monkeypatch.delenv("FIELDREFLECT_SETTER_STYLE", raising=False)
    reset_default_config()
    yield
    reset_default_config()
