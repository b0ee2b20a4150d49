"""
Policy Admin - Main application entry point.

Serves the administration panel backend for policy and party records
stored in Firestore.
"""

import sys

import uvicorn
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from policy_admin.config.logging import get_logger
from policy_admin.config.settings import get_required_env_vars, get_settings
from policy_admin.utils.config import initialize_application, validate_environment


def main() -> None:
    """Main application entry point."""
    initialize_application()

    logger = get_logger(__name__)
    logger.info("Starting policy admin application")

    settings = get_settings()

    if not validate_environment():
        logger.error("Environment validation failed")
        print(
            "Please set the required environment variables before running the application."
        )
        print(f"Required variables: {', '.join(get_required_env_vars())}")
        sys.exit(1)

    logger.info(
        "Starting API server",
        host=settings.endpoint_host,
        port=settings.endpoint_port,
        reload=settings.api_reload,
    )

    try:
        uvicorn.run(
            "policy_admin.webapi.app:app",
            host=settings.endpoint_host,
            port=settings.endpoint_port,
            reload=settings.api_reload,
            log_level=settings.api_log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")
        print("\nShutting down...")


if __name__ == "__main__":
    main()
