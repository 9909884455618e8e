"""
Volume service.

Owns the EC2/S3 clients for one VolumeConfig and exposes the public volume
operations. Clients are created on first use under a lock and then shared.
"""

import logging
import threading
import time
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from volume_toolkit import attachment, directory
from volume_toolkit.common.aws_client_factory import create_client
from volume_toolkit.common.waiter_utils import (
    wait_volume_available,
    wait_volume_deleted,
    wait_volume_in_use,
)
from volume_toolkit.config import VolumeConfig
from volume_toolkit.exceptions import (
    AttachVolumeError,
    ConfigurationError,
    DeleteVolumeError,
    SessionError,
    StagingCleanupError,
)
from volume_toolkit.import_task import await_import, request_import
from volume_toolkit.local_volume import build_local_volume
from volume_toolkit.materializer import materialize
from volume_toolkit.models import StagedArtifact, VolumeRecord
from volume_toolkit.storage import delete_from_bucket, upload_to_bucket
from volume_toolkit.tags import parse_tags


class VolumeService:
    """Volume operations bound to one configuration."""

    def __init__(
        self,
        config: VolumeConfig,
        ec2_client=None,
        s3_client=None,
        volume_builder=build_local_volume,
        clock=time.monotonic,
    ):
        self.config = config
        self._volume_builder = volume_builder
        self._clock = clock
        self._clients = {}
        if ec2_client is not None:
            self._clients["ec2"] = ec2_client
        if s3_client is not None:
            self._clients["s3"] = s3_client
        self._lock = threading.Lock()

    def _get_client(self, service_name):
        client = self._clients.get(service_name)
        if client is not None:
            return client
        with self._lock:
            if service_name not in self._clients:
                try:
                    self._clients[service_name] = create_client(
                        service_name, self.config.region, env_path=self.config.env_path
                    )
                except (ValueError, BotoCoreError) as exc:
                    raise SessionError(service_name, exc) from exc
            return self._clients[service_name]

    @property
    def ec2(self):
        return self._get_client("ec2")

    @property
    def s3(self):
        return self._get_client("s3")

    def create_volume(
        self,
        name: str,
        data: str,
        size: str,
        provider: str,
        cancel_event: Optional[threading.Event] = None,
    ) -> VolumeRecord:
        """
        Build a local image, import it as a snapshot and create a tagged volume.

        The staged S3 object is removed once the import completes. A failed
        import leaves it in the bucket, and a failed create leaves the
        snapshot behind; both are reported through the raised error.

        Returns:
            VolumeRecord of the created volume (id always set)
        """
        config = self.config
        if not config.bucket_name:
            raise ConfigurationError("a bucket is required to create volumes (set VOLUME_BUCKET)")

        ec2_client = self.ec2
        s3_client = self.s3
        tags = parse_tags(config.tags, name)

        local_volume = self._volume_builder(config, name, data, size, provider)
        staged = upload_to_bucket(s3_client, config.bucket_name, local_volume.name, local_volume.path)

        task_id = request_import(ec2_client, staged.bucket, staged.key, description=name)
        snapshot_id = await_import(
            ec2_client,
            task_id,
            poll_interval=config.poll_interval_seconds,
            max_attempts=config.max_poll_attempts,
            max_wait_seconds=config.max_wait_seconds,
            cancel_event=cancel_event,
            clock=self._clock,
        )

        self._discard_staged(staged)

        record = materialize(
            ec2_client, snapshot_id, config.placement_zone, tags, local_path=local_volume.path
        )
        if config.wait_for_available or config.delete_snapshot_after_create:
            self._finish_volume(record, snapshot_id)
        return record

    def _discard_staged(self, staged: StagedArtifact) -> None:
        try:
            delete_from_bucket(self.s3, staged.bucket, staged.key)
        except StagingCleanupError as exc:
            logging.warning("⚠️  Staged artifact left in bucket: %s", exc)

    def _finish_volume(self, record: VolumeRecord, snapshot_id: str) -> None:
        try:
            wait_volume_available(self.ec2, record.id)
        except WaiterError as exc:
            logging.warning("⚠️  Volume %s did not become available: %s", record.id, exc)
            return
        record.status = "available"

        if not self.config.delete_snapshot_after_create:
            return
        try:
            self.ec2.delete_snapshot(SnapshotId=snapshot_id)
            logging.info("🧹 Deleted intermediate snapshot %s", snapshot_id)
        except (ClientError, BotoCoreError) as exc:
            logging.warning("⚠️  Snapshot %s kept: %s", snapshot_id, exc)

    def list_volumes(self) -> list[VolumeRecord]:
        return directory.list_volumes(self.ec2)

    def find_volume(self, name: str) -> Optional[VolumeRecord]:
        return directory.find_volume_by_name(self.ec2, name)

    def delete_volume(self, volume_id: str, wait: bool = False) -> None:
        attachment.delete_volume(self.ec2, volume_id)
        if wait:
            try:
                wait_volume_deleted(self.ec2, volume_id)
            except WaiterError as exc:
                raise DeleteVolumeError(volume_id, None, str(exc)) from exc

    def attach_volume(
        self, instance_id: str, volume_id: str, device_name: Optional[str] = None, wait: bool = False
    ) -> None:
        attachment.attach_volume(
            self.ec2, instance_id, volume_id, device_name or self.config.device_name
        )
        if wait:
            try:
                wait_volume_in_use(self.ec2, volume_id)
            except WaiterError as exc:
                raise AttachVolumeError(volume_id, None, str(exc)) from exc

    def detach_volume(self, instance_id: str, volume_id: str, device_name: Optional[str] = None) -> None:
        attachment.detach_volume(
            self.ec2, instance_id, volume_id, device_name or self.config.device_name
        )


_SERVICES: dict = {}
_SERVICES_LOCK = threading.Lock()


def get_volume_service(config: VolumeConfig) -> VolumeService:
    """Return the process-wide VolumeService for `config`, creating it once."""
    with _SERVICES_LOCK:
        service = _SERVICES.get(config)
        if service is None:
            service = VolumeService(config)
            _SERVICES[config] = service
        return service


def reset_volume_services() -> None:
    """Drop cached services (used by tests and long-running callers rotating credentials)."""
    with _SERVICES_LOCK:
        _SERVICES.clear()


def create_volume(config, name, data, size, provider, cancel_event=None) -> VolumeRecord:
    """Create a volume from a locally built image."""
    return get_volume_service(config).create_volume(name, data, size, provider, cancel_event)


def list_volumes(config) -> list[VolumeRecord]:
    """List all volumes in the configured region."""
    return get_volume_service(config).list_volumes()


def find_volume(config, name) -> Optional[VolumeRecord]:
    """Look up a volume by its Name tag."""
    return get_volume_service(config).find_volume(name)


def delete_volume(config, volume_id, wait=False) -> None:
    """Delete a volume."""
    get_volume_service(config).delete_volume(volume_id, wait=wait)


def attach_volume(config, instance_id, volume_id, device_name=None, wait=False) -> None:
    """Attach a volume to an instance at the configured device slot."""
    get_volume_service(config).attach_volume(instance_id, volume_id, device_name, wait=wait)


def detach_volume(config, instance_id, volume_id, device_name=None) -> None:
    """Detach a volume from an instance."""
    get_volume_service(config).detach_volume(instance_id, volume_id, device_name)
