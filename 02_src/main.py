"""Main entry point for the check-in desk."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from desk.api import create_fastapi_app
from desk.app import Application
from desk.config import Settings
from desk.logging_config import setup_logging


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    app = create_fastapi_app(Application(settings=settings))

    # Run with uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
