"""Fixtures compartidas."""

from __future__ import annotations

import pytest

from rutcl.core.config import RutSettings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Entorno limpio: sin RUTCL_* heredadas ni .env del proyecto (cwd temporal)."""

    for key in ("RUTCL_RUT_MIN", "RUTCL_RUT_MAX", "RUTCL_DEFAULT_STYLE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> RutSettings:
    return RutSettings()
