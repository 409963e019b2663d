"""
providers/http.py
-----------------
Shared HTTP plumbing for the provider clients.

One ``httpx.AsyncClient`` is created at startup and shared by all
providers; every request is bounded by the client's timeout.
"""

from typing import Any, Optional

import httpx

from config import HTTP_TIMEOUT_SECONDS, USER_AGENT
from providers.exceptions import MalformedRecord, TransportFailure
from utils.logger import get_logger

logger = get_logger(__name__)


def create_http_client(
    timeout: float = HTTP_TIMEOUT_SECONDS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Build the shared async HTTP client.

    Args:
        timeout: Per-request timeout in seconds.
        transport: Optional transport override (used by tests).
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    params: Optional[dict[str, str]] = None,
    provider: str = "provider",
) -> Any:
    """
    GET a URL and decode its JSON body.

    Raises:
        TransportFailure: On network errors, timeouts or a non-2xx status.
        MalformedRecord: If the body is not valid JSON.
    """
    try:
        response = await client.get(url, params=params)
    except httpx.TimeoutException as e:
        raise TransportFailure(f"{provider}: request timed out") from e
    except httpx.HTTPError as e:
        raise TransportFailure(f"{provider}: request failed ({type(e).__name__})") from e

    if not response.is_success:
        raise TransportFailure(
            f"{provider}: HTTP {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        logger.debug(f"{provider} returned non-JSON body: {response.text[:200]!r}")
        raise MalformedRecord(f"{provider}: response is not valid JSON") from e
