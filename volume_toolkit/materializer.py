"""
Volume materializer.

Creates a live EBS volume from an imported snapshot.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from volume_toolkit.directory import volume_record_from_description
from volume_toolkit.exceptions import MaterializationError
from volume_toolkit.models import VolumeRecord

# Availability slot appended to the configured zone
ZONE_SLOT_SUFFIX = "c"


def availability_zone_for(zone: str) -> str:
    """Return the availability zone new volumes are placed in."""
    return f"{zone}{ZONE_SLOT_SUFFIX}"


def materialize(ec2_client, snapshot_id, zone, tags, local_path="") -> VolumeRecord:
    """
    Create a volume from `snapshot_id` in the zone's fixed slot.

    Args:
        ec2_client: Boto3 EC2 client
        snapshot_id: Completed snapshot to restore
        zone: Configured zone (the slot suffix is appended here)
        tags: EC2 tag list applied to the new volume
        local_path: Source image path recorded on the returned record

    Returns:
        VolumeRecord read back from the create_volume response

    Raises:
        MaterializationError: If EC2 rejects the request
    """
    availability_zone = availability_zone_for(zone)
    logging.info("💽 Creating volume from %s in %s", snapshot_id, availability_zone)
    try:
        response = ec2_client.create_volume(
            AvailabilityZone=availability_zone,
            SnapshotId=snapshot_id,
            TagSpecifications=[{"ResourceType": "volume", "Tags": tags}],
        )
    except (ClientError, BotoCoreError) as exc:
        raise MaterializationError(snapshot_id, exc) from exc

    description = dict(response)
    if not description.get("Tags"):
        description["Tags"] = tags
    record = volume_record_from_description(description, local_path=local_path)
    logging.info("✅ Created volume %s (%s)", record.id, record.status)
    return record
