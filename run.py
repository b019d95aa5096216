"""Command line entry point for the Marketplace API.

Subcommands:

* ``serve`` – run the API with Uvicorn.  Host and port default to the
  ``API_HOST`` and ``API_PORT`` settings (``0.0.0.0:3000``).
* ``frontend-config`` – print the front-end bundler configuration as
  JSON so the JavaScript build can consume it.
* ``routes`` – list every mounted route.

Configuration is read from environment variables; see
``marketplace_api/app/core/config.py`` for the supported names.

Usage:
    python run.py serve --port 3000
    python run.py frontend-config > frontend.config.json
"""
import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from uvicorn import Config, Server

logger = logging.getLogger(__name__)

# The package reads its settings at import time, so it is imported
# lazily: a bad environment variable is then reported by ``main``
# instead of failing at module import.


def load_settings():
    from marketplace_api.app.core.config import Settings

    return Settings.from_env()


async def serve(host: str, port: int, log_level: str) -> None:
    """Start the API using Uvicorn."""
    from marketplace_api.app.main import app

    config = Config(app=app, host=host, port=port, reload=False, log_level=log_level.lower())
    server = Server(config)
    await server.serve()


def print_frontend_config(settings, indent: int) -> None:
    from marketplace_api.app.core.frontend import FrontendBuildConfig

    config = FrontendBuildConfig.from_settings(settings)
    json.dump(config.to_dict(), sys.stdout, indent=indent)
    sys.stdout.write("\n")


def print_routes() -> None:
    from marketplace_api.app.core.routing import list_routes
    from marketplace_api.app.main import app

    for method, path in list_routes(app):
        print(f"{method:<7} {path}")


def build_parser(settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Marketplace API management commands.")
    sub = ap.add_subparsers(dest="command", required=True)

    serve_p = sub.add_parser("serve", help="Run the API server")
    serve_p.add_argument("--host", default=settings.host, help="Interface to bind")
    serve_p.add_argument("--port", type=int, default=settings.port, help="Port to listen on")

    fe_p = sub.add_parser("frontend-config", help="Print the front-end bundler config as JSON")
    fe_p.add_argument("--indent", type=int, default=2, help="JSON indentation")

    sub.add_parser("routes", help="List mounted routes")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1
    args = build_parser(settings).parse_args(argv)

    if args.command == "serve":
        try:
            asyncio.run(serve(args.host, args.port, settings.log_level))
        except (KeyboardInterrupt, SystemExit):
            pass
    elif args.command == "frontend-config":
        try:
            print_frontend_config(settings, args.indent)
        except ValueError as e:
            logger.error("Invalid front-end configuration: %s", e)
            return 1
    elif args.command == "routes":
        print_routes()
    return 0


if __name__ == "__main__":
    sys.exit(main())
