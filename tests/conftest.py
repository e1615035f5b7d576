"""
tests/conftest.py

Keep every test isolated from the developer's ``CODEBOX_*`` environment and
from a stray `.env` in the working directory.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("CODEBOX_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CODEBOX_STORAGE_PATH", str(tmp_path / "snippets.json"))
    yield
