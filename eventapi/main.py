#!/usr/bin/env python3
"""
Main entrypoint for the Event API server.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from . import config
from .db import Database, EventRepository
from .errors import EventApiError
from .logs import setup_logging
from .web import create_app, run_server

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Read-only JSON API over the Event table")
    parser.add_argument("--config", default=os.environ.get("EVENTAPI_CONFIG", config.CONFIG_NAME),
                        help="path of the database ini file (default: %(default)s)")
    parser.add_argument("--host", default=config.LISTEN_HOST,
                        help="address to listen on (default: %(default)s)")
    parser.add_argument("--port", type=int, default=config.LISTEN_PORT,
                        help="port to listen on (default: %(default)s)")
    parser.add_argument("--log-level", default=os.environ.get("EVENTAPI_LOG_LEVEL", config.LOG_LEVEL),
                        help="logging level (default: %(default)s)")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    """
    Start the server and block until it stops.

    Returns:
        Process exit status
    """
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        dbc, found = config.load(args.config)
    except OSError as e:
        logger.error("Could not write default config to %s: %s", args.config, e)
        found = False
    if not found:
        print(f"Generated default config at {args.config}. Please fill correct values.")
        return 1

    try:
        database = Database.open(dbc)
    except EventApiError as e:
        logger.critical("Invalid database configuration in %s: %s", args.config, e)
        return 1

    try:
        try:
            database.ping()
        except EventApiError as e:
            logger.debug("Ping failed: %s", e)
            logger.critical("Could not connect to the database. Please confirm %s "
                            "is using the correct values.", args.config)
            return 1

        app = create_app(EventRepository(database))
        print(f"Starting web server on port {args.port}")
        run_server(app, args.host, args.port)
    finally:
        database.close()
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
