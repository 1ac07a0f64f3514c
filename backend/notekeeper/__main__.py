"""
NoteKeeper Backend - Server Entry Point
=========================================

Usage:
    python -m notekeeper            # listens on 0.0.0.0:3001
    PORT=8080 python -m notekeeper  # port from the environment
    notekeeper                      # console script, same behavior
"""

import uvicorn

from notekeeper.config import settings


def main() -> None:
    uvicorn.run(
        "notekeeper.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
