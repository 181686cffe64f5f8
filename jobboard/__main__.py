"""
Job Board Backend — Process Entry Point
========================================

What:  `jobboard` console script and `python -m jobboard`.
How:   Builds Settings from the environment once, creates the app with them
       and serves it with uvicorn on HOST:PORT. Exits non-zero when the
       configuration is invalid or the database cannot be opened.
"""

import sys

import uvicorn
from pydantic import ValidationError as SettingsValidationError

from jobboard.config import Settings
from jobboard.main import create_app


def main() -> int:
    try:
        settings = Settings()
    except SettingsValidationError as e:
        # Logging is not configured yet; uvicorn never started
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        proxy_headers=True,
        lifespan="on",
    )
    server = uvicorn.Server(config)
    server.run()

    # uvicorn reports a failed lifespan startup by not marking the server started
    if not server.started:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
