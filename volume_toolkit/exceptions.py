"""
Exceptions for the volume toolkit.

Every error names the stage (operation) that failed so callers can tell a
failed upload from a failed import or a failed attach.
"""


class VolumeToolkitError(Exception):
    """Base class for all volume toolkit failures."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class ConfigurationError(VolumeToolkitError, ValueError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str):
        super().__init__("load config", message)


class SessionError(VolumeToolkitError):
    """Raised when the provider service handle cannot be obtained."""

    def __init__(self, service_name: str, error: Exception):
        super().__init__(f"get {service_name} service", str(error))


class LocalBuildError(VolumeToolkitError):
    """Raised when the local disk image cannot be built."""

    def __init__(self, name: str, reason: str):
        super().__init__("create local volume", f"{name}: {reason}")


class UploadError(VolumeToolkitError):
    """Raised when the local artifact cannot be copied to the bucket."""

    def __init__(self, bucket: str, key: str, error: Exception):
        super().__init__("copy volume archive to bucket", f"s3://{bucket}/{key}: {error}")


class StagingCleanupError(VolumeToolkitError):
    """Raised when a staged artifact cannot be removed from the bucket."""

    def __init__(self, bucket: str, key: str, error: Exception):
        super().__init__("delete staged artifact", f"s3://{bucket}/{key}: {error}")


class SnapshotImportError(VolumeToolkitError):
    """Base class for snapshot import failures."""


class ImportSubmissionError(SnapshotImportError):
    """Raised when the provider rejects an import request."""

    def __init__(self, bucket: str, key: str, error: Exception):
        super().__init__("import snapshot", f"s3://{bucket}/{key} rejected: {error}")


class ImportFailedError(SnapshotImportError):
    """Raised when an import task reaches a failed terminal state."""

    def __init__(self, task_id: str, cause: str):
        super().__init__("import snapshot", f"task {task_id} failed: {cause}")
        self.task_id = task_id
        self.cause = cause


class ImportTimeoutError(SnapshotImportError):
    """Raised when an import task is still pending after the configured bound."""

    def __init__(self, task_id: str, attempts: int, elapsed_seconds: float):
        super().__init__(
            "import snapshot",
            f"task {task_id} not finished after {attempts} polls ({elapsed_seconds:.0f}s)",
        )
        self.task_id = task_id
        self.attempts = attempts


class ImportCancelledError(SnapshotImportError):
    """Raised when the caller cancels the wait for an import task."""

    def __init__(self, task_id: str):
        super().__init__("import snapshot", f"wait for task {task_id} cancelled")
        self.task_id = task_id


class MaterializationError(VolumeToolkitError):
    """Raised when a volume cannot be created from an imported snapshot."""

    def __init__(self, snapshot_id: str, error: Exception):
        super().__init__("create aws volume", f"from {snapshot_id}: {error}")
        self.snapshot_id = snapshot_id


class VolumeListError(VolumeToolkitError):
    """Raised when volumes cannot be listed."""

    def __init__(self, error: Exception):
        super().__init__("list volumes", str(error))


class VolumeNotFoundError(VolumeToolkitError):
    """Raised when no volume carries the requested Name tag."""

    def __init__(self, name: str):
        super().__init__("find volume", f"no volume named {name!r}")
        self.name = name


class VolumeOperationError(VolumeToolkitError):
    """A single-shot volume call rejected by the provider."""

    def __init__(self, operation: str, volume_id: str, code, message: str):
        super().__init__(operation, f"{volume_id}: {message}")
        self.volume_id = volume_id
        self.code = code


class AttachVolumeError(VolumeOperationError):
    """Raised when a volume cannot be attached."""

    def __init__(self, volume_id: str, code, message: str):
        super().__init__("attach volume", volume_id, code, message)


class AttachConflictError(AttachVolumeError):
    """Raised when the volume or the device slot is already in use."""


class DetachVolumeError(VolumeOperationError):
    """Raised when a volume cannot be detached."""

    def __init__(self, volume_id: str, code, message: str):
        super().__init__("detach volume", volume_id, code, message)


class DetachConflictError(DetachVolumeError):
    """Raised when the volume is not attached where the detach says it is."""


class DeleteVolumeError(VolumeOperationError):
    """Raised when a volume cannot be deleted."""

    def __init__(self, volume_id: str, code, message: str):
        super().__init__("delete volume", volume_id, code, message)


class DeleteInUseError(DeleteVolumeError):
    """Raised when deleting a volume that is still attached."""
