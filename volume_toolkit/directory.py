"""
Volume directory.

Reads EBS volumes back from EC2 and normalizes them into VolumeRecords.
"""

from botocore.exceptions import BotoCoreError, ClientError

from volume_toolkit.common.aws_common import extract_tag_value
from volume_toolkit.exceptions import VolumeListError
from volume_toolkit.models import VolumeRecord
from volume_toolkit.tags import NAME_TAG


def _format_create_time(create_time) -> str:
    if create_time is None:
        return ""
    if hasattr(create_time, "isoformat"):
        return create_time.isoformat()
    return str(create_time)


def volume_record_from_description(volume, local_path="") -> VolumeRecord:
    """
    Build a VolumeRecord from a describe_volumes / create_volume entry.

    The name comes from the tag whose key is exactly "Name" (empty if none),
    and attachment instance ids keep the order EC2 reports them in.
    """
    return VolumeRecord(
        id=volume.get("VolumeId", ""),
        name=extract_tag_value(volume, NAME_TAG),
        status=volume.get("State", ""),
        size_gb=int(volume.get("Size") or 0),
        local_path=local_path,
        created_at=_format_create_time(volume.get("CreateTime")),
        availability_zone=volume.get("AvailabilityZone", ""),
        attached_instances=[
            attachment["InstanceId"]
            for attachment in volume.get("Attachments") or []
            if attachment.get("InstanceId")
        ],
    )


def list_volumes(ec2_client) -> list[VolumeRecord]:
    """
    List every volume visible to the client's credentials and region.

    Raises:
        VolumeListError: If EC2 rejects the describe call
    """
    records = []
    try:
        paginator = ec2_client.get_paginator("describe_volumes")
        for page in paginator.paginate():
            for volume in page.get("Volumes", []):
                records.append(volume_record_from_description(volume))
    except (ClientError, BotoCoreError) as exc:
        raise VolumeListError(exc) from exc
    return records


def find_volume_by_name(ec2_client, name):
    """Return the first listed volume whose Name tag equals `name`, or None."""
    for record in list_volumes(ec2_client):
        if record.name == name:
            return record
    return None
