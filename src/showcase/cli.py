"""Command Line Interface for Showcase."""

import asyncio
import sys
from typing import Optional

import click
from dotenv import load_dotenv

from . import __version__ as SHOWCASE_VERSION
from .config import settings
from .logger_config import VALID_LEVELS, setup_logger
from .runner import run

# Load environment variables
load_dotenv()


@click.command(help="Showcase: create a user, update its email, fetch JSON and compute a factorial.")
@click.version_option(version=SHOWCASE_VERSION, package_name="showcase")
@click.option(
    "--log-level",
    type=click.Choice(VALID_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: SHOWCASE_LOG_LEVEL or INFO)",
)
@click.option("--log-file", default=None, help="Also write logs to this file")
@click.option("--url", default=None, help="JSON endpoint to fetch (default: SHOWCASE_API_URL)")
@click.option(
    "--delay-ms",
    type=click.IntRange(min=0),
    default=None,
    help="Delay before the email update, in milliseconds",
)
def main(log_level: Optional[str], log_file: Optional[str], url: Optional[str], delay_ms: Optional[int]) -> None:
    overrides = {
        "log_level": log_level,
        "log_file": log_file,
        "api_url": url,
        "delay_ms": delay_ms,
    }
    run_settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    setup_logger(log_level=run_settings.log_level, log_file=run_settings.log_file, stream=sys.stdout)

    # Errors are reported by the run itself; exit status stays 0
    asyncio.run(run(run_settings))


# Set the command name to 'showcase' when used as a CLI
main.name = "showcase"


if __name__ == "__main__":
    main()
