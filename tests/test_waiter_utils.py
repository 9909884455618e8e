"""Tests for the waiter helper wrappers."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from volume_toolkit.common import waiter_utils


@pytest.mark.parametrize(
    ("helper", "waiter_name"),
    [
        (waiter_utils.wait_volume_available, "volume_available"),
        (waiter_utils.wait_volume_in_use, "volume_in_use"),
        (waiter_utils.wait_volume_deleted, "volume_deleted"),
    ],
)
def test_volume_waiters(helper, waiter_name):
    """Each helper requests the matching waiter with default settings."""
    client = MagicMock()
    waiter = MagicMock()
    client.get_waiter.return_value = waiter

    helper(client, "vol-123")

    client.get_waiter.assert_called_once_with(waiter_name)
    waiter.wait.assert_called_once_with(VolumeIds=["vol-123"], WaiterConfig={"Delay": 5, "MaxAttempts": 60})


def test_wait_volume_available_custom_settings():
    client = MagicMock()

    waiter_utils.wait_volume_available(client, "vol-123", delay=1, max_attempts=3)

    client.get_waiter.return_value.wait.assert_called_once_with(
        VolumeIds=["vol-123"], WaiterConfig={"Delay": 1, "MaxAttempts": 3}
    )
