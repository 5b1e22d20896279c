"""
Event API routes.
"""
import logging
import re
from typing import Any, Optional
from flask import Flask, abort, jsonify, request
from ..db import EventRepository
from ..errors import RepositoryError

logger = logging.getLogger(__name__)

CODE_NOT_INTEGER = 1
CODE_NO_RESULTS = 2
CODE_DATABASE_ERROR = 3

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def register_routes(app: Flask, repository: EventRepository) -> None:
    """Register the event routes with Flask app."""

    @app.before_request
    def reject_head() -> None: # pyright: ignore[reportUnusedFunction]
        # Rules for GET also match HEAD; only GET is served
        if request.method == "HEAD" and request.url_rule is not None:
            abort(405, valid_methods=["GET"])

    @app.route("/event", methods=["GET"], provide_automatic_options=False)
    def get_events() -> Any: # pyright: ignore[reportUnusedFunction]
        events = repository.list_all()
        return jsonify([e.to_dict() for e in events])

    @app.route("/event/<event_id>", methods=["GET"], provide_automatic_options=False)
    def get_event(event_id: str) -> Any: # pyright: ignore[reportUnusedFunction]
        parsed = parse_id(event_id)
        if parsed is None:
            return error_body(CODE_NOT_INTEGER, "ID was not an Integer")

        event = repository.get_by_id(parsed)
        if event is None:
            return error_body(CODE_NO_RESULTS, "No results")
        return jsonify(event.to_dict())

    @app.errorhandler(RepositoryError)
    def database_error(e: RepositoryError) -> Any: # pyright: ignore[reportUnusedFunction]
        logger.error("Request failed: %s", e, exc_info=e)
        return error_body(CODE_DATABASE_ERROR, "Database error"), 500


def parse_id(raw: str) -> Optional[int]:
    """Parse a signed decimal 64-bit integer, returning None when it is not one."""
    if not _INTEGER.fullmatch(raw):
        return None
    value = int(raw)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def error_body(code: int, message: str) -> Any:
    """Application-level error payload, served with HTTP 200 unless overridden."""
    return jsonify({"code": code, "message": message})
