"""Entry point for the Minimal API.

Starts the FastAPI application under Uvicorn.  Configuration is read
from the environment (see ``minimal_api.app.core.config``); at minimum
``JWT_SECRET`` must be set.  Host and port come from ``HOST`` and
``PORT`` (defaults ``0.0.0.0`` and ``8000``).

Usage:
    JWT_SECRET=... python run.py
"""
import os

import uvicorn


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "minimal_api.app.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=False,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
