"""
Command-line interface for the volume toolkit.

    volume-toolkit create NAME [--data DIR] [--size 1g] [--tag env=prod]
    volume-toolkit list
    volume-toolkit delete VOLUME
    volume-toolkit attach INSTANCE_ID VOLUME
    volume-toolkit detach INSTANCE_ID VOLUME

VOLUME is a volume id (vol-...) or the volume's Name tag.
"""

import argparse
import logging
import sys

from volume_toolkit import service
from volume_toolkit.common.credential_utils import check_aws_credentials
from volume_toolkit.config import load_config_from_env
from volume_toolkit.exceptions import VolumeNotFoundError, VolumeToolkitError
from volume_toolkit.reporting import print_volume_created, print_volume_table

EXIT_INTERRUPTED = 130
VOLUME_ID_PREFIX = "vol-"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        description="Create, list, attach, detach and delete EBS volumes built from local images"
    )
    parser.add_argument("--region", help="AWS region (default: AWS_DEFAULT_REGION)")
    parser.add_argument("--env-file", help="Path to the .env file with credentials and settings")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a volume from a local directory")
    create.add_argument("name", help="Volume name (stored in the Name tag)")
    create.add_argument("--data", default="", help="Directory whose contents seed the volume")
    create.add_argument("--size", default="", help="Volume size understood by mkfs, e.g. 1g")
    create.add_argument("--provider", default="aws", help="Provider label passed to the builder")
    create.add_argument("--bucket", help="Staging bucket (default: VOLUME_BUCKET)")
    create.add_argument("--zone", help="Placement zone (default: VOLUME_ZONE or the region)")
    create.add_argument(
        "--tag", action="append", default=None, metavar="KEY=VALUE", help="Extra tag (repeatable)"
    )
    create.add_argument("--poll-interval", type=float, help="Seconds between import status checks")
    create.add_argument("--max-wait", type=float, help="Give up on the import after this many seconds")
    create.add_argument(
        "--wait", action="store_true", help="Wait until the new volume is available"
    )
    create.add_argument(
        "--delete-snapshot",
        action="store_true",
        help="Delete the intermediate snapshot once the volume is available",
    )

    subparsers.add_parser("list", help="List volumes")

    delete = subparsers.add_parser("delete", help="Delete a volume")
    delete.add_argument("volume", help="Volume id or name")
    delete.add_argument("--wait", action="store_true", help="Wait until the volume is gone")

    attach = subparsers.add_parser("attach", help="Attach a volume to an instance")
    attach.add_argument("instance_id")
    attach.add_argument("volume", help="Volume id or name")
    attach.add_argument("--device", help="Device slot (default: VOLUME_DEVICE or /dev/sdf)")
    attach.add_argument("--wait", action="store_true", help="Wait until the volume is in use")

    detach = subparsers.add_parser("detach", help="Detach a volume from an instance")
    detach.add_argument("instance_id")
    detach.add_argument("volume", help="Volume id or name")
    detach.add_argument("--device", help="Device slot (default: VOLUME_DEVICE or /dev/sdf)")

    return parser


def _load_config(args):
    overrides = {"region": args.region}
    if args.command == "create":
        overrides.update(
            bucket_name=args.bucket,
            zone=args.zone,
            tags=tuple(args.tag) if args.tag else None,
            poll_interval_seconds=args.poll_interval,
            max_wait_seconds=args.max_wait,
            wait_for_available=args.wait or None,
            delete_snapshot_after_create=args.delete_snapshot or None,
        )
    return load_config_from_env(args.env_file, **overrides)


def _resolve_volume_id(config, volume):
    if volume.startswith(VOLUME_ID_PREFIX):
        return volume
    record = service.find_volume(config, volume)
    if record is None:
        raise VolumeNotFoundError(volume)
    return record.id


def run_command(args) -> None:
    """Dispatch parsed arguments to the matching volume operation."""
    config = _load_config(args)

    if args.command == "create":
        record = service.create_volume(config, args.name, args.data, args.size, args.provider)
        print_volume_created(record)
    elif args.command == "list":
        print_volume_table(service.list_volumes(config))
    elif args.command == "delete":
        volume_id = _resolve_volume_id(config, args.volume)
        service.delete_volume(config, volume_id, wait=args.wait)
        print(f"✅ Deleted volume {volume_id}")
    elif args.command == "attach":
        volume_id = _resolve_volume_id(config, args.volume)
        service.attach_volume(config, args.instance_id, volume_id, args.device, wait=args.wait)
        print(f"✅ Attached {volume_id} to {args.instance_id}")
    elif args.command == "detach":
        volume_id = _resolve_volume_id(config, args.volume)
        service.detach_volume(config, args.instance_id, volume_id, args.device)
        print(f"✅ Detached {volume_id} from {args.instance_id}")


def main(argv=None) -> int:
    """Entry point for the volume-toolkit command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if not check_aws_credentials(args.env_file):
        return 1

    try:
        run_command(args)
    except VolumeToolkitError as e:
        print(f"❌ {e}")
        return 1
    except KeyboardInterrupt:
        print("❌ Operation cancelled")
        return EXIT_INTERRUPTED
    return 0


if __name__ == "__main__":
    sys.exit(main())
