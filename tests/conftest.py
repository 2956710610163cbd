"""Root test configuration — isolate tests from MDBLOG_* environment settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MDBLOG_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("MDBLOG_"):
            monkeypatch.delenv(name, raising=False)
