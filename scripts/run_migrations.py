#!/usr/bin/env python3
"""Apply the votes schema migrations with Logfire error tracking."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from ratings.config import Settings
from ratings.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision`` and log failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations", revision=revision):
            command.upgrade(Config(str(ALEMBIC_INI)), revision)

        logfire.info("Votes schema is up to date", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than serve against a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
