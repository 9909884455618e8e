"""
Shared AWS credential loading utilities.
"""

from volume_toolkit.common.aws_client_factory import (
    _resolve_env_path,
    load_credentials_from_env,
)


def check_aws_credentials(env_path=None):
    """
    Check if AWS credentials can be loaded from .env file.

    Returns:
        bool: True if credentials found, False otherwise (prints error message)
    """
    try:
        load_credentials_from_env(env_path)
    except ValueError:
        resolved_path = _resolve_env_path(env_path)
        print(f"⚠️  AWS credentials not found in {resolved_path}.")
        print(f"Please ensure {resolved_path} contains:")
        print("  AWS_ACCESS_KEY_ID=your-access-key")
        print("  AWS_SECRET_ACCESS_KEY=your-secret-key")
        print("  AWS_DEFAULT_REGION=us-east-1")
        return False
    return True
