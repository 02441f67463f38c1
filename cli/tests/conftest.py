from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("NETRC", "SFX_AUTH_TOKEN", "SFX_API_URL", "SFX_CUSTOM_APP_URL"):
        monkeypatch.delenv(name, raising=False)
