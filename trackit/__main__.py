"""Run the Trackit API with uvicorn.

Host and port are read from the HOST and PORT environment variables
(defaults 0.0.0.0 and 8000), after loading an optional .env file from the
project root.

Usage:
    python -m trackit
"""
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .core.config import get_settings


def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    settings = get_settings()
    uvicorn.run(
        "trackit.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
