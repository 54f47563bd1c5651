#!/usr/bin/env python3
"""Run the comment API under uvicorn, reporting startup failures to Logfire."""

import argparse
import sys

import logfire
import uvicorn

from colloquy.config import Settings
from colloquy.util.logging import setup_logging
from colloquy.util.observability import configure_logfire

APP_FACTORY = "colloquy.interface.api.app:create_app"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting comment API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        reload=args.reload,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=args.reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Comment API failed to start",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
