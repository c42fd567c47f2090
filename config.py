import os
import logging
from dotenv import load_dotenv

# I want env vars and logging ready before anything else imports me.
load_dotenv()
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)


def _as_float(v: str | None, default=None):
    # Little helper so an empty HTTP_TIMEOUT= line in .env doesn't blow up float().
    if v is None or not str(v).strip():
        return default
    return float(v)


# The site and the account I call Jira as; nothing works without these.
JIRA_SITE = os.getenv("JIRA_SITE") or ""
JIRA_BASE_URL = (os.getenv("JIRA_BASE_URL") or f"https://{JIRA_SITE}").rstrip("/")
JIRA_EMAIL = os.getenv("JIRA_EMAIL") or ""
JIRA_API_TOKEN = os.getenv("JIRA_API_TOKEN") or ""

# Leave HTTP_TIMEOUT unset and requests will wait as long as Jira does.
HTTP_TIMEOUT = _as_float(os.getenv("HTTP_TIMEOUT"))

QUEUE_ROUTE_TEMPLATE = "/rest/servicedeskapi/servicedesk/{service_desk_id}/queue/{queue_id}"

REMEDIATION_HINT = "Make sure the queue URL is valid and you have access to the service desk project"
