from __future__ import annotations
import logging
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from config import (
    JIRA_BASE_URL,
    JIRA_EMAIL,
    JIRA_API_TOKEN,
    HTTP_TIMEOUT,
    QUEUE_ROUTE_TEMPLATE,
)

log = logging.getLogger(__name__)


# Keeping one session around so every call reuses connections and carries auth.
_session = requests.Session()
_session.auth = (JIRA_EMAIL, JIRA_API_TOKEN)
_session.mount("https://", HTTPAdapter(pool_connections=4, pool_maxsize=4))


def queue_route(service_desk_id: str, queue_id: str) -> str:
    """Render the queue resource path with both ids escaped as single segments."""
    return QUEUE_ROUTE_TEMPLATE.format(
        service_desk_id=quote(str(service_desk_id), safe=""),
        queue_id=quote(str(queue_id), safe=""),
    )


def jira_request(path: str, headers: dict | None = None, timeout=HTTP_TIMEOUT) -> requests.Response:
    """GET ``path`` on the configured Jira site as the configured user.

    The response is handed back as-is; callers look at ``ok``/``status_code``
    themselves. Connection errors and timeouts are raised by requests.
    """
    url = f"{JIRA_BASE_URL}{path}"
    log.debug("Jira GET %s", url)
    return _session.get(url, headers=headers or {}, timeout=timeout)
