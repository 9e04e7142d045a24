"""Shared fixtures for the sub-renamer test suite."""
from pathlib import Path

import pytest

from subrenamer.config import (
    ENV_SUBTITLE_EXT,
    ENV_SUBTITLE_REGEX,
    ENV_VIDEO_EXT,
    ENV_VIDEO_REGEX,
    build_config,
)

ENV_VARS = (ENV_SUBTITLE_REGEX, ENV_VIDEO_REGEX, ENV_SUBTITLE_EXT, ENV_VIDEO_EXT)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep real .env files and SUBRENAMER_* variables out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def media_dir(tmp_path) -> Path:
    d = tmp_path / "episodes"
    d.mkdir()
    return d


@pytest.fixture
def touch():
    """Create empty files and return their paths."""
    def _touch(directory: Path, *names: str) -> list[Path]:
        paths = []
        for name in names:
            path = directory / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("")
            paths.append(path)
        return paths
    return _touch


@pytest.fixture
def make_config(media_dir):
    def _make(pattern=r"S(\d{2})E(\d{2})", **kwargs):
        kwargs.setdefault("directory", media_dir)
        return build_config(pattern, kwargs.pop("video_regex", None), **kwargs)
    return _make
