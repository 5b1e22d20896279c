"""
Flask server exposing the Event API.
"""
from flask import Flask
from ..db import EventRepository
from .routes import register_routes


def create_app(repository: EventRepository) -> Flask:
    """
    Create the Flask app with the event routes bound to a repository.

    Args:
        repository: Repository sharing the process-wide database pool
    """
    app = Flask(__name__)
    # Keep Event fields in column order
    app.json.sort_keys = False  # pyright: ignore[reportAttributeAccessIssue]
    register_routes(app, repository)
    return app


def run_server(app: Flask, host: str, port: int) -> None:
    """Serve until interrupted, one thread per request."""
    app.run(
        host=host,
        port=port,
        debug=False,
        use_reloader=False,
        threaded=True
    )
