"""
Tag parsing for new volumes.
"""

from volume_toolkit.exceptions import ConfigurationError

NAME_TAG = "Name"
CREATED_BY_TAG = "CreatedBy"
CREATED_BY_VALUE = "volume_toolkit"


def parse_tags(raw_tags, volume_name):
    """
    Turn "key=value" strings into an EC2 tag list.

    The Name tag always carries the volume name, replacing any Name given in
    raw_tags. A CreatedBy tag is added unless raw_tags sets one.

    Args:
        raw_tags: Iterable of "key=value" strings
        volume_name: Logical volume name

    Returns:
        list: [{"Key": ..., "Value": ...}, ...] in input order

    Raises:
        ConfigurationError: If an entry has no "=", has an empty key or repeats a key
    """
    tags = []
    seen = set()
    for raw in raw_tags or ():
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigurationError(f"invalid tag {raw!r}, expected key=value")
        if key == NAME_TAG:
            continue
        if key in seen:
            raise ConfigurationError(f"duplicate tag key {key!r}")
        seen.add(key)
        tags.append({"Key": key, "Value": value.strip()})

    if CREATED_BY_TAG not in seen:
        tags.append({"Key": CREATED_BY_TAG, "Value": CREATED_BY_VALUE})
    tags.append({"Key": NAME_TAG, "Value": volume_name})
    return tags
