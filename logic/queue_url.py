from __future__ import annotations
import logging
from typing import NamedTuple
from urllib.parse import urlsplit

log = logging.getLogger(__name__)


class QueueUrlError(ValueError):
    """The queue URL couldn't be turned into a service desk + queue id."""


class QueueReference(NamedTuple):
    service_desk_id: str
    queue_id: str


def _index_of(parts: list[str], marker: str) -> int:
    try:
        return parts.index(marker)
    except ValueError:
        return -1


def parse_queue_url(queue_url: str) -> QueueReference:
    """Pull the project key and queue id out of a service desk queue URL.

    Handles both ``.../projects/SD/queues/custom/42`` and
    ``.../projects/SD/queues/42``. Only the first ``projects`` and ``queues``
    segments count, and ``custom`` is a one-segment lookahead, nothing smarter.
    """
    if not isinstance(queue_url, str):
        raise QueueUrlError(f"Invalid URL: {queue_url!r}")
    try:
        url = urlsplit(queue_url)
    except ValueError as e:
        raise QueueUrlError(f"Invalid URL: {queue_url}") from e
    if not url.scheme or not url.netloc:
        raise QueueUrlError(f"Invalid URL: {queue_url}")

    parts = url.path.split("/")

    projects_idx = _index_of(parts, "projects")
    if projects_idx == -1 or projects_idx + 1 >= len(parts) or not parts[projects_idx + 1]:
        raise QueueUrlError("Invalid queue URL format: cannot find project key")
    project_key = parts[projects_idx + 1]

    queues_idx = _index_of(parts, "queues")
    # ".../queues" and ".../queues/" both leave me nothing to read an id from.
    trailing = parts[queues_idx + 1:] if queues_idx != -1 else []
    if queues_idx == -1 or not trailing or trailing == [""]:
        raise QueueUrlError("Invalid queue URL format: cannot find queue ID")

    if parts[queues_idx + 1] == "custom":
        if queues_idx + 2 >= len(parts):
            raise QueueUrlError("Invalid queue URL format: cannot find queue ID")
        queue_id = parts[queues_idx + 2]
    else:
        queue_id = parts[queues_idx + 1]

    if not queue_id:
        raise QueueUrlError("Invalid queue URL format: queue ID not found")

    log.info("Parsed queue URL - Project: %s, Queue ID: %s", project_key, queue_id)
    return QueueReference(project_key, queue_id)
