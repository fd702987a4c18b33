"""Shared fixtures for the GiveHub client tests."""

import os
from unittest.mock import MagicMock

import pytest

from givehub.core import credentials


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GIVEHUB_* variables from the developer's shell or .env out of tests."""
    monkeypatch.setattr(credentials, "_env_loaded", True)
    for name in list(os.environ):
        if name.startswith("GIVEHUB_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def transport():
    """A transport double; set ``send.return_value`` or ``send.side_effect``."""
    return MagicMock(spec=["send", "close"])
