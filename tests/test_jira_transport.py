import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from services import jira


def test_queue_route_plain_ids():
    assert jira.queue_route("SD", "42") == "/rest/servicedeskapi/servicedesk/SD/queue/42"


def test_queue_route_escapes_segments():
    assert jira.queue_route("S/D", "4 2?") == "/rest/servicedeskapi/servicedesk/S%2FD/queue/4%202%3F"


def test_jira_request_uses_session(monkeypatch):
    calls = []

    def fake_get(url, headers=None, timeout=None):
        calls.append((url, headers, timeout))
        return "resp"

    monkeypatch.setattr(jira, "JIRA_BASE_URL", "https://x.atlassian.net")
    monkeypatch.setattr(jira._session, "get", fake_get)
    out = jira.jira_request("/rest/foo", headers={"Accept": "application/json"}, timeout=5.0)
    assert out == "resp"
    assert calls == [("https://x.atlassian.net/rest/foo", {"Accept": "application/json"}, 5.0)]
