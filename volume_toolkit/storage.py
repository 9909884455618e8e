"""
Object store gateway.

Stages local images in S3 so EC2 can import them, and removes them afterwards.
"""

import logging

from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from volume_toolkit.exceptions import StagingCleanupError, UploadError
from volume_toolkit.models import StagedArtifact


def upload_to_bucket(s3_client, bucket, key, local_path) -> StagedArtifact:
    """
    Upload a local image to s3://bucket/key.

    Raises:
        UploadError: If the upload fails; the local file is left untouched
    """
    logging.info("⬆️  Uploading %s to s3://%s/%s", local_path, bucket, key)
    try:
        s3_client.upload_file(local_path, bucket, key)
    except (ClientError, BotoCoreError, S3UploadFailedError, OSError) as exc:
        raise UploadError(bucket, key, exc) from exc
    return StagedArtifact(bucket=bucket, key=key, local_path=local_path)


def delete_from_bucket(s3_client, bucket, key) -> None:
    """
    Remove a staged object.

    Raises:
        StagingCleanupError: If S3 rejects the delete
    """
    try:
        s3_client.delete_object(Bucket=bucket, Key=key)
    except (ClientError, BotoCoreError) as exc:
        raise StagingCleanupError(bucket, key, exc) from exc
    logging.info("🧹 Removed staged artifact s3://%s/%s", bucket, key)
