import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "debug"))

import json

import queue_cli
from logic.queue import QueueFetchError


def test_cli_prints_result_and_exit_code(monkeypatch, capsys):
    monkeypatch.setattr(queue_cli, "fetch_queue_jql", lambda payload: QueueFetchError("Queue URL is required"))
    assert queue_cli.run_cli(["https://x"]) == 1
    assert json.loads(capsys.readouterr().out)["error"] == "Queue URL is required"


def test_cli_usage():
    assert queue_cli.run_cli([]) == 2
