"""
Volume Toolkit
Builds EBS volumes from local disk images through EC2 snapshot import, and
lists, attaches, detaches and deletes them.
"""

from .config import VolumeConfig, load_config_from_env
from .exceptions import VolumeToolkitError
from .models import ImportState, ImportTask, LocalVolume, StagedArtifact, VolumeRecord
from .service import (
    VolumeService,
    attach_volume,
    create_volume,
    delete_volume,
    detach_volume,
    find_volume,
    get_volume_service,
    list_volumes,
)

__all__ = [
    "ImportState",
    "ImportTask",
    "LocalVolume",
    "StagedArtifact",
    "VolumeConfig",
    "VolumeRecord",
    "VolumeService",
    "VolumeToolkitError",
    "attach_volume",
    "create_volume",
    "delete_volume",
    "detach_volume",
    "find_volume",
    "get_volume_service",
    "list_volumes",
    "load_config_from_env",
]
