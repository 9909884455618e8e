"""
Console output for volume records.
"""

from typing import Iterable

from volume_toolkit.models import VolumeRecord

TABLE_COLUMNS = ("NAME", "ID", "STATUS", "SIZE (GB)", "ZONE", "CREATED", "ATTACHED")


def _row(record: VolumeRecord) -> tuple:
    return (
        record.name or "-",
        record.id,
        record.status,
        str(record.size_gb),
        record.availability_zone or "-",
        record.created_at or "-",
        record.attached_to or "-",
    )


def print_volume_table(records: Iterable[VolumeRecord]) -> None:
    """Print volumes as an aligned table, or a notice when there are none."""
    rows = [_row(record) for record in records]
    if not rows:
        print("No volumes found")
        return

    widths = [len(column) for column in TABLE_COLUMNS]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def _line(cells):
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    print(_line(TABLE_COLUMNS))
    print("  ".join("-" * width for width in widths))
    for row in rows:
        print(_line(row))


def print_volume_created(record: VolumeRecord) -> None:
    """Print the summary shown after a successful create."""
    print(f"✅ Volume {record.name or record.id} created")
    print(f"   ID: {record.id}")
    print(f"   Status: {record.status}")
    print(f"   Size: {record.size_gb} GB")
    print(f"   Availability Zone: {record.availability_zone}")
    if record.local_path:
        print(f"   Source image: {record.local_path}")
