"""
Main entry point for the wire message service.

This module loads configuration, initializes the database
and starts the FastAPI server.
"""
import sys
from pathlib import Path

# Add project root to Python path for module imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
from pydantic import ValidationError as SettingsValidationError

from core.config import get_settings
from core.exceptions import ConfigurationError
from core.logger import setup_logger

# Load environment variables from .env file
_env_file = PROJECT_ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    print("Warning: .env file not found. Using environment variables or defaults.")

logger = setup_logger(__name__)


def main():
    """Main application entry point."""
    try:
        # Load and validate configuration
        try:
            settings = get_settings()
        except SettingsValidationError as e:
            raise ConfigurationError(
                "Invalid configuration",
                details={"errors": [f"{err['loc']}: {err['msg']}" for err in e.errors()]}
            )

        import uvicorn
        from app.api import create_app

        app = create_app(settings)

        logger.info(f"Starting {settings.app_name}")
        logger.info(f"Log Level: {settings.log_level}")
        logger.info(f"Database: {settings.database_path} (timeout {settings.database_timeout}s)")
        logger.info(f"Authentication required: {settings.auth_required}")
        if settings.auth_required and not settings.credentials():
            logger.warning("AUTH_USERS is empty; no one will be able to log in")

        logger.info(f"Starting server on {settings.host}:{settings.port}")

        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower()
        )

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        if e.details:
            logger.error(f"Details: {e.details}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Failed to start application: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
