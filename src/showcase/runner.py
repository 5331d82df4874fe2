"""Sequential tour of the Showcase helpers.

:func:`run` creates a user, updates its email after a short delay, fetches
a JSON array and computes a factorial, logging each step.  It is the only
place where errors are recovered: the first failure stops the tour, is
logged, and is returned on :class:`RunResult` instead of being raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from .config import Settings, settings
from .fetch import fetch_data
from .logger_config import get_logger
from .mathutils import factorial
from .timing import delay
from .user import User

logger = get_logger(__name__)


@dataclass
class RunResult:
    """Outcome of a single :func:`run`.

    Attributes:
        details: User details right after construction.
        updated_details: User details after the email update.
        preview: Leading slice of the fetched payload, same type as the payload.
        factorial: Result of the factorial step.
        error: The exception that stopped the run, if any.
    """

    details: Optional[str] = None
    updated_details: Optional[str] = None
    preview: Optional[Any] = None
    factorial: Optional[int] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def run(config: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None) -> RunResult:
    """Run every step in order and return what was produced.

    Args:
        config: Settings to use; defaults to the global settings.
        client: Optional httpx client passed through to :func:`fetch_data`.
    """
    cfg = config or settings
    result = RunResult()

    try:
        logger.info("Starting main function...")

        user = User(cfg.user_name, cfg.user_age, cfg.user_email)
        result.details = user.get_details()
        logger.info(result.details)

        logger.info("Updating email...")
        await delay(cfg.delay_ms)
        user.update_email(cfg.new_email)
        result.updated_details = user.get_details()
        logger.info(f"Updated User: {result.updated_details}")

        logger.info("Fetching data from API...")
        data = await fetch_data(cfg.api_url, client=client)
        result.preview = data[: cfg.preview_count]
        logger.info(f"Fetched API Data: {result.preview}")

        logger.info(f"Calculating factorial of {cfg.factorial_input}...")
        result.factorial = factorial(cfg.factorial_input)
        logger.info(f"Factorial of {cfg.factorial_input}: {result.factorial}")
    except Exception as e:
        logger.error(f"An error occurred: {e}")
        result.error = e

    return result
