"""
Consolidated AWS waiter utilities.

Each function wraps an EC2 waiter with default delays and max attempts.
"""


def wait_volume_available(ec2_client, volume_id, delay=5, max_attempts=60):
    """
    Wait for an EBS volume to reach the available state.

    Args:
        ec2_client: Boto3 EC2 client
        volume_id: Volume ID to wait for
        delay: Delay between polling attempts in seconds (default: 5)
        max_attempts: Maximum number of attempts (default: 60, ~5 min)

    Raises:
        WaiterError: If waiter times out or encounters an error
    """
    waiter = ec2_client.get_waiter("volume_available")
    waiter.wait(VolumeIds=[volume_id], WaiterConfig={"Delay": delay, "MaxAttempts": max_attempts})


def wait_volume_in_use(ec2_client, volume_id, delay=5, max_attempts=60):
    """Wait for an EBS volume to report in-use after an attach."""
    waiter = ec2_client.get_waiter("volume_in_use")
    waiter.wait(VolumeIds=[volume_id], WaiterConfig={"Delay": delay, "MaxAttempts": max_attempts})


def wait_volume_deleted(ec2_client, volume_id, delay=5, max_attempts=60):
    """Wait for an EBS volume to disappear after deletion."""
    waiter = ec2_client.get_waiter("volume_deleted")
    waiter.wait(VolumeIds=[volume_id], WaiterConfig={"Delay": delay, "MaxAttempts": max_attempts})
