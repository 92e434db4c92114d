"""Test configuration and fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

VALID_WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Create a temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def env(home_dir: Path) -> dict[str, str]:
    """Environment with HOME pointing at the temporary home directory."""
    return {"HOME": str(home_dir)}


@pytest.fixture
def config_path(home_dir: Path) -> Path:
    """Location of the configuration file inside the temporary home."""
    return home_dir / ".config" / "slacks.json"


@pytest.fixture
def stored_config(config_path: Path) -> dict[str, Any]:
    """Write a complete configuration file and return its contents."""
    data = {
        "webhook_url": VALID_WEBHOOK_URL,
        "channel": "#random",
        "username": "deploy-bot",
        "icon_emoji": ":robot_face:",
        "debug_mode": False,
    }
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return data
