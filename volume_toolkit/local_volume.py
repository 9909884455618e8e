"""
Local volume builder.

Wraps the external mkfs tool that turns a directory of files into a raw
disk image. The toolkit only drives the tool; it does not build filesystems.
"""

import logging
import os
import subprocess
from pathlib import Path

from volume_toolkit.exceptions import LocalBuildError
from volume_toolkit.models import LocalVolume

MKFS_TIMEOUT_SECONDS = 600


def local_volume_path(volumes_dir: str, name: str) -> str:
    """Return the path the raw image for `name` is written to."""
    return str(Path(volumes_dir) / f"{name}.raw")


def build_mkfs_command(mkfs_path, name, data, size, output_path):
    """Assemble the mkfs argument list; empty data/size options are omitted."""
    command = [mkfs_path, "-l", name]
    if size:
        command.extend(["-s", size])
    if data:
        command.extend(["-d", data])
    command.append(output_path)
    return command


def build_local_volume(config, name, data, size, provider) -> LocalVolume:
    """
    Build a raw disk image for a new volume.

    Args:
        config: VolumeConfig supplying volumes_dir and mkfs_path
        name: Logical volume name, also used as the image file stem
        data: Directory whose contents seed the volume (may be empty)
        size: Size string understood by mkfs, e.g. "1g" (may be empty)
        provider: Target cloud provider label, recorded in logs

    Returns:
        LocalVolume describing the produced image

    Raises:
        LocalBuildError: If inputs are invalid or mkfs fails
    """
    if not name:
        raise LocalBuildError(name, "volume name is required")
    if data and not os.path.isdir(data):
        raise LocalBuildError(name, f"data directory {data} does not exist")

    Path(config.volumes_dir).mkdir(parents=True, exist_ok=True)
    output_path = local_volume_path(config.volumes_dir, name)
    command = build_mkfs_command(config.mkfs_path, name, data, size, output_path)

    logging.info("🔨 Building local volume %s for %s", name, provider)
    try:
        result = subprocess.run(
            command, capture_output=True, text=True, timeout=MKFS_TIMEOUT_SECONDS, check=False
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise LocalBuildError(name, str(exc)) from exc

    if result.returncode != 0:
        raise LocalBuildError(name, result.stderr.strip() or f"mkfs exited with {result.returncode}")
    if not os.path.exists(output_path):
        raise LocalBuildError(name, f"mkfs did not produce {output_path}")

    logging.info("✅ Local volume written to %s", output_path)
    return LocalVolume(name=name, path=output_path)
