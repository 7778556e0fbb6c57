"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from synonomous import config as cfg
from synonomous.sequence import SynonymList


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Use hardcoded defaults unless a test loads a config file."""
    monkeypatch.delenv(cfg.CONFIG_ENV_VAR, raising=False)
    cfg.reset()
    yield
    cfg.reset()


@pytest.fixture
def style_names():
    """Plain string labels."""
    return SynonymList(["borderLeft", "background-color"])


@pytest.fixture
def style_records():
    """Record elements with the label under "style"."""
    return SynonymList([
        {"style": "borderLeft", "value": "8px"},
        {"style": "background-color", "value": "red"},
    ])


@pytest.fixture
def sample_config_content():
    """Sample JSON config file content."""
    return """{
    "defaults": {
        "transformations": ["verbatim", "toAllCaps"],
        "prop_path": "style",
        "dict_path": "dict"
    }
}
"""
