from pathlib import Path

import pytest


class FakeClipboard:
    """In-memory clipboard sink."""

    def __init__(self, available: bool = True, succeed: bool = True):
        self.available = available
        self.succeed = succeed
        self.copied: list[str] = []

    def is_available(self) -> bool:
        return self.available

    def copy(self, text: str) -> bool:
        self.copied.append(text)
        return self.succeed


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Point HOME at an empty temp directory and drop any XDG override."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return home_dir


@pytest.fixture
def store_path(home) -> Path:
    return home / ".oneliners"


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def make_clipboard():
    """Build a FakeClipboard with custom availability or copy outcome."""
    return FakeClipboard
