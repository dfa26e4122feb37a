"""
Server entrypoint for the Gemini task proxy.

Usage:
    python -m app.api.main

Configuration:
- `HOST` / `PORT`: bind address (default `0.0.0.0:8000`).
- `LOG_LEVEL`: root logging level (default `INFO`).

Production deployments can point any ASGI server at `app.api.http_api:app`
directly; this module only adds logging setup and a uvicorn launcher.
"""

import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()


def configure_logging():
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()
    uvicorn.run(
        "app.api.http_api:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").lower(),
    )


if __name__ == "__main__":
    main()
