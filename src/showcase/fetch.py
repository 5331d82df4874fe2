"""One-shot JSON fetch over HTTP."""

from typing import Any, NoReturn, Optional

import httpx

from .exceptions import DecodeError, FetchError, HttpStatusError, NetworkError
from .logger_config import get_logger

logger = get_logger(__name__)


def _fail(error: FetchError, cause: Optional[BaseException] = None) -> NoReturn:
    logger.error(f"Fetching data failed: {error}")
    raise error from cause


async def _get(url: str, client: Optional[httpx.AsyncClient]) -> httpx.Response:
    # Redirects are followed whatever the client default is
    if client is not None:
        return await client.get(url, follow_redirects=True)
    async with httpx.AsyncClient(follow_redirects=True) as owned_client:
        return await owned_client.get(url)


async def fetch_data(url: str, client: Optional[httpx.AsyncClient] = None) -> Any:
    """
    GET ``url`` and return the decoded JSON body.

    Redirects are followed. No retries and no timeout beyond httpx's
    default. Every failure is logged and then raised.

    Args:
        url: Absolute URL to fetch.
        client: Optional client to send the request with. When omitted a
            client is created for this call and closed afterwards.

    Returns:
        The parsed JSON value, unchanged.

    Raises:
        NetworkError: The request did not complete.
        HttpStatusError: The response status is not 2xx. The body is not parsed.
        DecodeError: The body is not valid JSON.
    """
    logger.debug(f"GET {url}")
    try:
        response = await _get(url, client)
    except httpx.RequestError as e:
        _fail(NetworkError(f"Request to {url} failed: {e!r}", url), e)

    if not response.is_success:
        _fail(HttpStatusError(url, response.status_code, response.reason_phrase))

    try:
        return response.json()
    except ValueError as e:
        _fail(DecodeError(f"Response from {url} is not valid JSON: {e}", url), e)
