#!/usr/bin/env python3
"""Apply Alembic migrations up to head, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from reactions.config import Settings
from reactions.util.observability import configure_logfire


def main() -> int:
    """Upgrade the reactions schema to the latest revision."""
    settings = Settings()
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations", environment=settings.environment):
            # migrations/env.py reads the database URL from Settings
            command.upgrade(Config("alembic.ini"), "head")

        logfire.info("Reaction schema is up to date")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than start on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
