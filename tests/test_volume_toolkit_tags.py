"""Tests for volume_toolkit/tags.py"""

from __future__ import annotations

import pytest

from tests.assertions import assert_equal
from volume_toolkit.exceptions import ConfigurationError
from volume_toolkit.tags import parse_tags


def test_parse_tags_adds_created_by_and_name():
    tags = parse_tags(["env=prod", "team = storage"], "db1")

    assert_equal(
        tags,
        [
            {"Key": "env", "Value": "prod"},
            {"Key": "team", "Value": "storage"},
            {"Key": "CreatedBy", "Value": "volume_toolkit"},
            {"Key": "Name", "Value": "db1"},
        ],
    )


def test_name_tag_always_matches_volume_name():
    tags = parse_tags(["Name=other"], "db1")

    assert_equal([tag for tag in tags if tag["Key"] == "Name"], [{"Key": "Name", "Value": "db1"}])


def test_user_created_by_wins():
    tags = parse_tags(["CreatedBy=ci"], "db1")

    assert_equal([tag["Value"] for tag in tags if tag["Key"] == "CreatedBy"], ["ci"])


def test_value_may_contain_equals_or_be_empty():
    tags = parse_tags(["query=a=b", "empty="], "db1")

    assert {"Key": "query", "Value": "a=b"} in tags
    assert {"Key": "empty", "Value": ""} in tags


def test_no_tags():
    assert_equal(len(parse_tags(None, "db1")), 2)


@pytest.mark.parametrize("raw", ["novalue", "=value", "  =x"])
def test_invalid_tags(raw):
    with pytest.raises(ConfigurationError):
        parse_tags([raw], "db1")


def test_repeated_key_is_rejected():
    with pytest.raises(ConfigurationError, match="duplicate tag key 'env'"):
        parse_tags(["env=a", "env=b"], "db1")
