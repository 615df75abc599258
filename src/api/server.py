"""Process entry point for the pull request details service."""

import argparse
import logging
import sys

import uvicorn

from src.config.exceptions import ConfigurationError, ConfigurationMissingError
from src.config.loader import DEFAULT_ENV_FILE, load_config
from src.config.models import LogLevel

from .app import create_app

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = (
    "This app requires GitHub token to be set as GITHUB_TOKEN env var. "
    "More details in https://docs.github.com/en/rest/overview/"
    "resources-in-the-rest-api#rate-limiting. Exiting..."
)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the HTTP server."""
    parser = argparse.ArgumentParser(description="Pull Request Details Service")
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help="Dotenv file read before the environment (default: .env)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=[level.value for level in LogLevel],
        help="Log level (overrides configuration)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or LogLevel.INFO.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config, env_file=args.env_file)
    except ConfigurationMissingError:
        logger.error(MISSING_TOKEN_MESSAGE)
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    log_level = args.log_level or config.system.log_level.value
    logging.getLogger().setLevel(log_level)

    app = create_app(config)

    logger.info(f"App is listening on port {config.server.port}!")
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
