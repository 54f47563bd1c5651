#!/usr/bin/env python3
"""Apply comment store migrations, reporting failures to Logfire."""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from colloquy.config import Settings
from colloquy.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--config", default="alembic.ini")
    parser.add_argument(
        "--sql", action="store_true", help="Print the SQL instead of running it"
    )
    args = parser.parse_args(argv)

    configure_logfire(Settings())
    alembic_cfg = Config(args.config)

    with logfire.span("Migrating comment store", revision=args.revision, sql=args.sql):
        try:
            command.upgrade(alembic_cfg, args.revision, sql=args.sql)
        except Exception as e:
            # The deploy must stop here rather than serve against a stale schema
            logfire.error(
                "Migration failed",
                revision=args.revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
