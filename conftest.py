"""Pytest configuration shared by the whole volume toolkit tree."""

# pylint: disable=wrong-import-position

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest


@pytest.fixture(autouse=True)
def mock_aws_env_file(tmp_path, monkeypatch):
    """Point AWS_ENV_FILE at a temporary .env with mock credentials.

    Volume settings are cleared from the environment so a developer's real
    configuration never leaks into a test.
    """
    env_file = tmp_path / ".env"
    env_file.write_text("AWS_ACCESS_KEY_ID=test_key\nAWS_SECRET_ACCESS_KEY=test_secret\n")
    monkeypatch.setenv("AWS_ENV_FILE", str(env_file))
    for name in (
        "VOLUME_BUCKET",
        "VOLUME_ZONE",
        "VOLUME_TAGS",
        "VOLUME_DEVICE",
        "VOLUME_POLL_INTERVAL",
        "VOLUME_MAX_POLL_ATTEMPTS",
        "VOLUME_MAX_WAIT_SECONDS",
        "AWS_DEFAULT_REGION",
        "AWS_SESSION_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    yield str(env_file)
