"""Lowest-level HTTP for external clients (LLM providers, Steam): sends the request, turns every failure into BackendError."""
from typing import Any

import httpx

from app.core.errors import BackendError


async def request_json(
    method: str,
    url: str,
    *,
    provider: str,
    timeout: float,
    client: httpx.AsyncClient | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Send one request and return the decoded JSON object.
    Uses `client` when given (tests pass one with a MockTransport), else a short-lived client.
    """
    try:
        if client is not None:
            r = await client.request(method, url, timeout=timeout, **kwargs)
        else:
            async with httpx.AsyncClient(timeout=timeout) as c:
                r = await c.request(method, url, **kwargs)
    except httpx.TimeoutException as e:
        raise BackendError(f"{provider} request timed out after {timeout}s", provider=provider) from e
    except httpx.HTTPError as e:
        raise BackendError(f"{provider} request failed: {e}", provider=provider) from e
    if not r.is_success:
        detail = r.text[:500] if r.text else ""
        raise BackendError(f"{provider} API error: {r.status_code} {detail}".strip(), provider=provider)
    try:
        data = r.json()
    except ValueError as e:
        raise BackendError(f"{provider} returned a non-JSON body", provider=provider) from e
    if not isinstance(data, dict):
        raise BackendError(f"{provider} returned an unexpected body", provider=provider)
    return data
