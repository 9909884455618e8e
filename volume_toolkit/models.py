"""
Data records passed between the import pipeline and the volume directory.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass
class VolumeRecord:
    """Normalized view of an EBS volume."""

    id: str = ""
    name: str = ""
    status: str = ""
    size_gb: int = 0
    local_path: str = ""
    created_at: str = ""
    availability_zone: str = ""
    attached_instances: list[str] = field(default_factory=list)

    @property
    def attached_to(self) -> str:
        """Attachments joined the way the listing table shows them."""
        return ";".join(self.attached_instances)


class ImportState(Enum):
    """States an import task can be observed in."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ImportTask:
    """A snapshot import as last reported by the provider."""

    task_id: str
    state: ImportState = ImportState.PENDING
    snapshot_id: Optional[str] = None
    status_message: str = ""
    progress: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.state is not ImportState.PENDING


@dataclass(frozen=True)
class StagedArtifact:
    """A local image copied to a bucket as input for an import."""

    bucket: str
    key: str
    local_path: str


@dataclass(frozen=True)
class LocalVolume:
    """A disk image produced on the local filesystem."""

    name: str
    path: str
