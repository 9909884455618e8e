"""
Attachment controller.

Single-shot attach, detach and delete calls. Provider errors are surfaced as
they are and never retried here.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from volume_toolkit.common.aws_common import get_error_code, get_error_message
from volume_toolkit.config import DEFAULT_DEVICE_NAME
from volume_toolkit.exceptions import (
    AttachConflictError,
    AttachVolumeError,
    DeleteInUseError,
    DeleteVolumeError,
    DetachConflictError,
    DetachVolumeError,
)

ATTACH_CONFLICT_CODES = ("VolumeInUse", "IncorrectState", "AttachmentLimitExceeded")
DETACH_CONFLICT_CODES = ("IncorrectState", "InvalidAttachment.NotFound")
DELETE_IN_USE_CODES = ("VolumeInUse",)


def _translate(exc, volume_id, base_error, conflict_error, conflict_codes):
    if not isinstance(exc, ClientError):
        return base_error(volume_id, None, str(exc))
    code = get_error_code(exc)
    message = get_error_message(exc)
    # EC2 reports an occupied device slot as InvalidParameterValue
    if code in conflict_codes or "already in use" in message:
        return conflict_error(volume_id, code, message)
    return base_error(volume_id, code, message)


def attach_volume(ec2_client, instance_id, volume_id, device_name=DEFAULT_DEVICE_NAME):
    """
    Attach a volume to an instance at `device_name`.

    Raises:
        AttachConflictError: The volume or the device slot is already in use
        AttachVolumeError: Any other rejection
    """
    logging.info("🔗 Attaching %s to %s at %s", volume_id, instance_id, device_name)
    try:
        ec2_client.attach_volume(Device=device_name, InstanceId=instance_id, VolumeId=volume_id)
    except (ClientError, BotoCoreError) as exc:
        raise _translate(
            exc, volume_id, AttachVolumeError, AttachConflictError, ATTACH_CONFLICT_CODES
        ) from exc


def detach_volume(ec2_client, instance_id, volume_id, device_name=DEFAULT_DEVICE_NAME):
    """
    Detach a volume from an instance using the same device slot.

    Raises:
        DetachConflictError: The volume is not attached there
        DetachVolumeError: Any other rejection
    """
    logging.info("🔓 Detaching %s from %s at %s", volume_id, instance_id, device_name)
    try:
        ec2_client.detach_volume(Device=device_name, InstanceId=instance_id, VolumeId=volume_id)
    except (ClientError, BotoCoreError) as exc:
        raise _translate(
            exc, volume_id, DetachVolumeError, DetachConflictError, DETACH_CONFLICT_CODES
        ) from exc


def delete_volume(ec2_client, volume_id):
    """
    Permanently delete a volume. Attachment state is left to EC2 to enforce.

    Raises:
        DeleteInUseError: The volume is still attached
        DeleteVolumeError: Any other rejection
    """
    logging.info("🗑️  Deleting volume %s", volume_id)
    try:
        ec2_client.delete_volume(VolumeId=volume_id)
    except (ClientError, BotoCoreError) as exc:
        raise _translate(
            exc, volume_id, DeleteVolumeError, DeleteInUseError, DELETE_IN_USE_CODES
        ) from exc
