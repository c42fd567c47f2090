from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from config import REMEDIATION_HINT
from services.jira import jira_request, queue_route
from logic.queue_url import QueueUrlError, parse_queue_url

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueueJql:
    queue_name: str | None
    jql: str | None
    service_desk_id: str
    queue_id: str
    issue_types: list = field(default_factory=list)
    columns: list = field(default_factory=list)

    success = True

    def as_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "queueName": self.queue_name,
            "jql": self.jql,
            "serviceDeskId": self.service_desk_id,
            "queueId": self.queue_id,
            "issueTypes": list(self.issue_types),
            "columns": list(self.columns),
        }


@dataclass(frozen=True)
class QueueFetchError:
    error: str
    details: str | None = None

    success = False

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": False, "error": self.error}
        if self.details is not None:
            out["details"] = self.details
        return out


QueueResult = Union[QueueJql, QueueFetchError]


def fetch_queue_jql(payload: dict | None, request_jira: Callable[..., Any] = jira_request) -> QueueResult:
    """Look up the JQL behind a service desk queue URL.

    ``payload`` is the action input (``{"queueUrl": ...}``). ``request_jira``
    is the authenticated transport: called as ``request_jira(path, headers=...)``
    and expected to return something with ``status_code``, ``reason``,
    ``text`` and ``json()``. Only a 2xx status counts as success. Never
    raises; every failure comes back as a :class:`QueueFetchError`.
    """
    try:
        queue_url = (payload or {}).get("queueUrl")
        if not queue_url:
            return QueueFetchError("Queue URL is required")

        log.info("Fetching JQL for queue URL: %s", queue_url)
        try:
            ref = parse_queue_url(queue_url)
        except QueueUrlError as e:
            log.error("Error parsing queue URL: %s", e)
            return QueueFetchError(f"Failed to parse queue URL: {e}")

        resp = request_jira(
            queue_route(ref.service_desk_id, ref.queue_id),
            headers={"Accept": "application/json"},
        )
        if not 200 <= resp.status_code < 300:
            log.error("❌ JSM queue request failed: %s - %s", resp.status_code, resp.text[:800])
            return QueueFetchError(f"Failed to fetch queue data: {resp.status_code} {resp.reason}")

        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError("Queue response was not a JSON object")
        log.info("Fetched queue data: %s", json.dumps(data, indent=2))

        return QueueJql(
            queue_name=data.get("name"),
            jql=data.get("jql"),
            service_desk_id=ref.service_desk_id,
            queue_id=ref.queue_id,
            issue_types=data.get("issueTypes") or [],
            columns=data.get("columns") or [],
        )
    except Exception as e:
        log.exception("Fetching queue JQL failed: %s", e)
        return QueueFetchError(str(e), details=REMEDIATION_HINT)
