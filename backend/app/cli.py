"""
Command line entry point.

    python -m app                 serve with uvicorn
    python -m app --get-routes    print the route table as JSON and exit
"""

import argparse
import logging
import sys
from typing import List, Optional

from app import __version__
from app.config import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basic-resource",
        description="Greeting resource rendering HTML templates.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--get-routes",
        action="store_true",
        help="print routes as json",
    )
    parser.add_argument("--host", default=settings.backend_host, help="bind address")
    parser.add_argument("--port", type=int, default=settings.backend_port, help="bind port")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Imported here so --help and --version stay fast
    from app.main import app, setup_logging
    from app.services.route_catalog import collect_routes, routes_as_json

    if args.get_routes:
        sys.stdout.write(routes_as_json(collect_routes(app)) + "\n")
        return 0

    import uvicorn

    setup_logging()
    logger.info("Starting uvicorn on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
