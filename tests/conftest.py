"""Shared fixtures for kwtrie tests."""

import logging

import pytest

from kwtrie.utils import paths as pathutil
from kwtrie.utils.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config and artifact paths at a scratch directory."""
    config_dir = tmp_path / "configs"
    config_dir.mkdir()
    monkeypatch.chdir(tmp_path)
    pathutil.clear_cache()
    pathutil.set_config_dir(config_dir)
    yield config_dir
    pathutil.clear_cache()
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def keywords_csv(tmp_path):
    """Write a keyword file and return its path."""

    def _write(rows, header="keyword", name="keywords.csv"):
        path = tmp_path / name
        lines = [header] + list(rows)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def text_file(tmp_path):
    def _write(text, name="text.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
