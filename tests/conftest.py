"""Shared pytest fixtures for test files."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from volume_toolkit import service
from volume_toolkit.common import aws_client_factory, credential_utils
from volume_toolkit.config import VolumeConfig


@pytest.fixture(autouse=True)
def stub_credentials(monkeypatch):
    """Provide fake AWS credentials so create_client doesn't read a real .env."""

    def _load_credentials(env_path=None):
        del env_path
        return "stub-key", "stub-secret"

    monkeypatch.setattr(aws_client_factory, "load_credentials_from_env", _load_credentials)
    monkeypatch.setattr(credential_utils, "load_credentials_from_env", _load_credentials)


@pytest.fixture(autouse=True)
def reset_service_cache():
    """Keep cached VolumeServices from leaking between tests."""
    service.reset_volume_services()
    yield
    service.reset_volume_services()


@pytest.fixture
def make_client_error():
    """Factory for botocore ClientErrors with a given code and message."""

    def _make(code, message="", operation="Operation"):
        return ClientError({"Error": {"Code": code, "Message": message}}, operation)

    return _make


@pytest.fixture
def volume_config(tmp_path):
    """Config with zero-delay polling and a temporary volumes directory."""
    return VolumeConfig(
        bucket_name="staging-bucket",
        region="us-west-2",
        zone="us-west-2",
        tags=("env=prod",),
        poll_interval_seconds=0,
        max_poll_attempts=5,
        max_wait_seconds=None,
        volumes_dir=str(tmp_path / "volumes"),
    )


@pytest.fixture
def mock_ec2():
    """EC2 client mock with a paginator returning no volumes."""
    client = MagicMock()
    client.get_paginator.return_value.paginate.return_value = [{"Volumes": []}]
    return client


@pytest.fixture
def mock_s3():
    return MagicMock()
