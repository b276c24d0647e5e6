"""CLI tool for running the service.

Usage:
    python -m trading_journal.cli serve
"""

import sys

import uvicorn

from trading_journal.config import settings


def serve():
    """Run the API under uvicorn on the configured host and port."""
    uvicorn.run(
        "trading_journal.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m trading_journal.cli <command>")
        print("Commands: serve")
        sys.exit(1)

    command = sys.argv[1]
    if command == "serve":
        serve()
    else:
        print(f"Unknown command: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
