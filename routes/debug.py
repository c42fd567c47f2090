from __future__ import annotations
from flask import Blueprint, request, jsonify
from logic.queue_url import QueueUrlError, parse_queue_url

bp = Blueprint("debug", __name__)

@bp.get("/debug/queue-url")
def debug_queue_url():
    url = (request.args.get("url") or "").strip()
    if not url:
        return jsonify({"error": "pass ?url=..."}), 400
    try:
        ref = parse_queue_url(url)
    except QueueUrlError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"serviceDeskId": ref.service_desk_id, "queueId": ref.queue_id}), 200
