"""Shared fixtures: keep tests away from real credentials and config files."""

from __future__ import annotations

import io
from pathlib import Path

import pytest


class FakeResponse(io.BytesIO):
    """Stand-in for the object returned by urllib.request.urlopen."""

    def __init__(self, body: bytes, status: int = 200) -> None:
        super().__init__(body)
        self.status = status


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory with no blogsite env vars set."""
    for var in (
        "OPENAI_API_KEY",
        "BLOGSITE_SITE_ROOT",
        "BLOGSITE_IMAGE_MODEL",
        "BLOGSITE_IMAGE_PAUSE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("blogsite.config.GLOBAL_CONFIG_PATH", tmp_path / "no-global.toml")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_response() -> type[FakeResponse]:
    return FakeResponse
