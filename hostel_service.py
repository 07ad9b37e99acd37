from __future__ import annotations
import logging
from datetime import datetime, timezone

from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from hostel import config
from hostel.store import HostelManager
from hostel.utils import parse_int_safe, parse_bool_safe

logger = logging.getLogger("smart_hostel.api")

CORS_OPTIONS = dict(
    origins="*",
    send_wildcard=True,
    methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    max_age=86400,
)


def _json_body() -> dict:
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}


def _message(text: str, status: int):
    return jsonify({"message": text}), status


def create_app(manager: HostelManager | None = None) -> Flask:
    app = Flask(__name__)
    if manager is None:
        manager = HostelManager(config.DB_PATH)

    CORS(app, resources={r"/api/*": CORS_OPTIONS})

    @app.after_request
    def _add_headers(resp):
        if resp.mimetype == "application/json":
            resp.headers["Cache-Control"] = "no-store"
            resp.headers["X-Server-Time"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        return resp

    @app.errorhandler(405)
    def _method_not_allowed(_e):
        return _message("Method not allowed", 405)

    @app.errorhandler(Exception)
    def _internal_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return _message("Internal server error", 500)

    @app.route("/api/rooms", methods=["GET", "POST", "OPTIONS"])
    def rooms():
        if request.method == "OPTIONS":
            return "", 204
        if request.method == "GET":
            return jsonify([r.to_json() for r in manager.get_all_rooms()])

        data = _json_body()
        room_no = "" if data.get("roomNo") is None else str(data["roomNo"]).strip()
        capacity = parse_int_safe(data.get("capacity"), -1)
        has_ac = parse_bool_safe(data.get("hasAC"), False)
        has_washroom = parse_bool_safe(data.get("hasAttachedWashroom"), False)

        if not manager.add_room(room_no, capacity, has_ac, has_washroom):
            return _message("Room number already exists (or invalid).", 409)
        return _message("Room added.", 201)

    @app.route("/api/rooms/search", methods=["GET", "OPTIONS"])
    def search_rooms():
        if request.method == "OPTIONS":
            return "", 204
        min_capacity = max(parse_int_safe(request.args.get("minCapacity"), 1), 1)
        needs_ac = parse_bool_safe(request.args.get("needsAC"), False)
        needs_washroom = parse_bool_safe(request.args.get("needsWashroom"), False)

        found = manager.search_rooms(min_capacity, needs_ac, needs_washroom)
        return jsonify([r.to_json() for r in found])

    @app.route("/api/rooms/allocate", methods=["POST", "OPTIONS"])
    def allocate_room():
        if request.method == "OPTIONS":
            return "", 204
        data = _json_body()
        students = parse_int_safe(data.get("students"), -1)
        needs_ac = parse_bool_safe(data.get("needsAC"), False)
        needs_washroom = parse_bool_safe(data.get("needsWashroom"), False)
        if students < 1:
            return _message("students must be >= 1", 400)

        room = manager.allocate_room(students, needs_ac, needs_washroom)
        if room is None:
            return _message("No room available", 404)
        return jsonify(room.to_json())

    return app


if __name__ == "__main__":
    app = create_app()
    logger.info("Smart Hostel API running on http://localhost:%d (db: %s)", config.PORT, config.DB_PATH)
    app.run(host=config.HOST, port=config.PORT, threaded=True)
