from __future__ import annotations
import logging
from flask import Blueprint, request, jsonify
from logic.queue import fetch_queue_jql

log = logging.getLogger(__name__)
bp = Blueprint("core", __name__)


@bp.route("/actions/fetch-queue-jql", methods=["POST"])
def fetch_queue_jql_action():
    # Failures ride along in the body, so I always answer 200 here.
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    result = fetch_queue_jql(payload)
    if not result.success:
        log.warning("Queue JQL lookup failed: %s", result.error)
    return jsonify(result.as_dict()), 200
