"""
Shared helpers for reading AWS resource descriptions and botocore errors.
"""

from botocore.exceptions import ClientError


def extract_tag_value(resource, key, default=""):
    """
    Extract a specific tag value from an AWS resource.

    Args:
        resource: AWS resource dict containing 'Tags' key
        key: Tag key to search for (exact match)
        default: Default value if tag not found

    Returns:
        str: Tag value if found, otherwise default value
    """
    for tag in resource.get("Tags") or []:
        if tag["Key"] == key:
            return tag["Value"]
    return default


def get_error_code(error: ClientError):
    """Return the AWS error code from a ClientError, or None when absent."""
    return error.response.get("Error", {}).get("Code")


def get_error_message(error: ClientError) -> str:
    """Return the provider's error message, falling back to str(error)."""
    return error.response.get("Error", {}).get("Message") or str(error)
