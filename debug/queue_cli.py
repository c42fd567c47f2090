"""Quick CLI to fetch a queue's JQL from the terminal."""

# I use this to try a queue URL from the terminal; same code path as the action, minus Flask.

import json
import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from logic.queue import fetch_queue_jql


def run_cli(argv: list[str]) -> int:
    if len(argv) != 1:
        print("usage: queue_cli.py <queue-url>", file=sys.stderr)
        return 2
    result = fetch_queue_jql({"queueUrl": argv[0]})
    print(json.dumps(result.as_dict(), indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(run_cli(sys.argv[1:]))
