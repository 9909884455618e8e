"""
Snapshot import state machine.

A staged S3 object is handed to EC2 ImportSnapshot, which returns a task id
right away. The task is then polled until EC2 reports it completed (yielding
a snapshot id) or failed. Polling is bounded by an attempt count and/or a
wall-clock budget and can be cancelled through a threading.Event.
"""

import logging
import threading
import time
from typing import Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from volume_toolkit.exceptions import (
    ImportCancelledError,
    ImportFailedError,
    ImportSubmissionError,
    ImportTimeoutError,
)
from volume_toolkit.models import ImportState, ImportTask

IMPORT_DISK_FORMAT = "raw"
IMPORT_CONTAINER_DESCRIPTION = "snapshot imported"
FAILED_STATUSES = ("deleting", "deleted")


def request_import(ec2_client, bucket, key, description) -> str:
    """
    Submit an ImportSnapshot request for s3://bucket/key.

    Returns:
        str: The import task id

    Raises:
        ImportSubmissionError: If EC2 rejects the request
    """
    logging.info("🔄 Importing snapshot from s3://%s/%s...", bucket, key)
    try:
        response = ec2_client.import_snapshot(
            Description=description,
            DiskContainer={
                "Description": IMPORT_CONTAINER_DESCRIPTION,
                "Format": IMPORT_DISK_FORMAT,
                "UserBucket": {"S3Bucket": bucket, "S3Key": key},
            },
        )
    except (ClientError, BotoCoreError) as exc:
        raise ImportSubmissionError(bucket, key, exc) from exc

    task_id = response["ImportTaskId"]
    logging.info("✅ Started import task: %s", task_id)
    return task_id


def parse_import_task(task_description) -> ImportTask:
    """Classify one entry of describe_import_snapshot_tasks."""
    detail = task_description.get("SnapshotTaskDetail") or {}
    status = (detail.get("Status") or "").lower()
    task = ImportTask(
        task_id=task_description["ImportTaskId"],
        status_message=detail.get("StatusMessage") or "",
        progress=detail.get("Progress") or "",
    )

    if status == "completed":
        task.state = ImportState.COMPLETED
        task.snapshot_id = detail.get("SnapshotId")
    elif status in FAILED_STATUSES or "fail" in status:
        task.state = ImportState.FAILED
    return task


def get_import_task(ec2_client, task_id) -> ImportTask:
    """
    Fetch the current state of an import task.

    Raises:
        ImportFailedError: If the status call fails or the task is unknown
    """
    try:
        response = ec2_client.describe_import_snapshot_tasks(ImportTaskIds=[task_id])
    except (ClientError, BotoCoreError) as exc:
        raise ImportFailedError(task_id, f"status check failed: {exc}") from exc

    tasks = response.get("ImportSnapshotTasks") or []
    if not tasks:
        raise ImportFailedError(task_id, "task not found")
    return parse_import_task(tasks[0])


def await_import(
    ec2_client,
    task_id: str,
    poll_interval: float = 15,
    max_attempts: Optional[int] = None,
    max_wait_seconds: Optional[float] = None,
    cancel_event: Optional[threading.Event] = None,
    clock: Callable[[], float] = time.monotonic,
) -> str:
    """
    Block until an import task finishes and return its snapshot id.

    Only "still running" answers are retried. Errors from EC2 and failed
    tasks end the wait immediately.

    Args:
        ec2_client: Boto3 EC2 client
        task_id: Id returned by request_import
        poll_interval: Seconds between status checks
        max_attempts: Stop after this many status checks (None for no limit)
        max_wait_seconds: Stop once this much time has passed (None for no limit)
        cancel_event: Setting it stops the wait without waiting for the next poll
        clock: Monotonic time source

    Raises:
        ValueError: A bound is out of range (negative interval, fewer than one attempt)
        ImportFailedError: The task failed, vanished, or could not be checked
        ImportTimeoutError: A bound was reached while the task was pending
        ImportCancelledError: cancel_event was set
    """
    if poll_interval < 0:
        raise ValueError(f"poll_interval must not be negative, got {poll_interval}")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    if max_wait_seconds is not None and max_wait_seconds <= 0:
        raise ValueError(f"max_wait_seconds must be positive, got {max_wait_seconds}")
    if cancel_event is None:
        cancel_event = threading.Event()

    logging.info("⏳ Monitoring import progress for %s...", task_id)
    started = clock()
    attempts = 0

    while True:
        if cancel_event.is_set():
            raise ImportCancelledError(task_id)

        task = get_import_task(ec2_client, task_id)
        attempts += 1
        logging.info(
            "📊 Import status: %s, Progress: %s", task.state.value, task.progress or "N/A"
        )

        if task.is_terminal:
            if task.state is ImportState.FAILED:
                raise ImportFailedError(task_id, task.status_message or "Unknown error")
            if not task.snapshot_id:
                raise ImportFailedError(task_id, "completed without a snapshot id")
            logging.info("✅ Import completed! Snapshot ID: %s", task.snapshot_id)
            return task.snapshot_id

        elapsed = clock() - started
        if max_attempts is not None and attempts >= max_attempts:
            raise ImportTimeoutError(task_id, attempts, elapsed)

        delay = poll_interval
        if max_wait_seconds is not None:
            remaining = max_wait_seconds - elapsed
            if remaining <= 0:
                raise ImportTimeoutError(task_id, attempts, elapsed)
            delay = min(delay, remaining)

        if cancel_event.wait(delay):
            raise ImportCancelledError(task_id)
