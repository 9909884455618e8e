"""
Configuration for the volume toolkit.

Values come from the process environment after loading the same .env file
used for AWS credentials (see common.aws_client_factory._resolve_env_path).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from volume_toolkit.common.aws_client_factory import _resolve_env_path
from volume_toolkit.exceptions import ConfigurationError

# Device slot every attach/detach uses unless the caller overrides it
DEFAULT_DEVICE_NAME: str = "/dev/sdf"

# Import polling
DEFAULT_POLL_INTERVAL_SECONDS: float = 15
DEFAULT_MAX_POLL_ATTEMPTS: int = 240
DEFAULT_MAX_WAIT_SECONDS: float = 3600

# Local image building, relative to the home directory at config time
DEFAULT_VOLUMES_SUBDIR: str = ".ops/volumes"
DEFAULT_MKFS_PATH: str = "mkfs"


def default_volumes_dir() -> str:
    return str(Path.home() / DEFAULT_VOLUMES_SUBDIR)


@dataclass(frozen=True)
class VolumeConfig:
    """Settings shared by every volume operation."""

    bucket_name: str
    region: str
    zone: str = ""
    tags: tuple[str, ...] = ()
    device_name: str = DEFAULT_DEVICE_NAME
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS
    max_poll_attempts: Optional[int] = DEFAULT_MAX_POLL_ATTEMPTS
    max_wait_seconds: Optional[float] = DEFAULT_MAX_WAIT_SECONDS
    delete_snapshot_after_create: bool = False
    wait_for_available: bool = False
    volumes_dir: str = field(default_factory=default_volumes_dir)
    mkfs_path: str = DEFAULT_MKFS_PATH
    env_path: Optional[str] = None

    @property
    def placement_zone(self) -> str:
        """Zone handed to the materializer; falls back to the region."""
        return self.zone or self.region

    def __post_init__(self):
        if self.poll_interval_seconds < 0:
            raise ConfigurationError(
                f"poll interval must not be negative, got {self.poll_interval_seconds}"
            )
        if self.max_poll_attempts is not None and self.max_poll_attempts < 1:
            raise ConfigurationError(f"max poll attempts must be at least 1, got {self.max_poll_attempts}")
        if self.max_wait_seconds is not None and self.max_wait_seconds <= 0:
            raise ConfigurationError(f"max wait must be positive, got {self.max_wait_seconds}")


def _split_tags(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def load_config_from_env(env_path: Optional[str] = None, **overrides) -> VolumeConfig:
    """
    Build a VolumeConfig from environment variables.

    Reads VOLUME_BUCKET, AWS_DEFAULT_REGION, VOLUME_ZONE, VOLUME_TAGS,
    VOLUME_DEVICE, VOLUME_POLL_INTERVAL, VOLUME_MAX_POLL_ATTEMPTS and
    VOLUME_MAX_WAIT_SECONDS. Keyword overrides win over the environment and
    are ignored when None.

    The bucket is only checked when a volume is created.

    Raises:
        ConfigurationError: If the region cannot be determined or a number is malformed
    """
    resolved_path = _resolve_env_path(env_path)
    load_dotenv(resolved_path)

    values = {
        "bucket_name": os.getenv("VOLUME_BUCKET", ""),
        "region": os.getenv("AWS_DEFAULT_REGION", ""),
        "zone": os.getenv("VOLUME_ZONE", ""),
        "tags": _split_tags(os.getenv("VOLUME_TAGS", "")),
        "device_name": os.getenv("VOLUME_DEVICE") or DEFAULT_DEVICE_NAME,
        "poll_interval_seconds": _env_number(
            "VOLUME_POLL_INTERVAL", DEFAULT_POLL_INTERVAL_SECONDS, float
        ),
        "max_poll_attempts": _env_number("VOLUME_MAX_POLL_ATTEMPTS", DEFAULT_MAX_POLL_ATTEMPTS, int),
        "max_wait_seconds": _env_number("VOLUME_MAX_WAIT_SECONDS", DEFAULT_MAX_WAIT_SECONDS, float),
        "env_path": env_path,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    if isinstance(values["tags"], list):
        values["tags"] = tuple(values["tags"])

    if not values["region"]:
        raise ConfigurationError(f"AWS_DEFAULT_REGION is not set (checked {resolved_path})")

    return VolumeConfig(**values)
