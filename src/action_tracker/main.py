"""Action tracker main entry point."""

import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .config import LoggingConfig, get_settings


def load_environment(project_root: Path = Path.cwd()) -> None:
    """Load ``.env`` and then ``.env.local`` overrides into the environment."""
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    env_local_file = project_root / ".env.local"
    if env_local_file.exists():
        load_dotenv(env_local_file, override=True)


load_environment()

# Configure logging based on environment
LoggingConfig.configure()

from .app import create_app

logger = logging.getLogger(__name__)

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "action_tracker.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
