#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from reactions.config import AuthSettings, Settings
from reactions.util.error import ConfigurationError
from reactions.util.logging import setup_logging
from reactions.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == AuthSettings().jwt_secret
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

        logfire.info(
            "Starting reactions API", host=settings.host, port=settings.port
        )

        uvicorn.run(
            "reactions.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
