# utils/http_json.py
# One JSON round-trip over requests, every failure mapped to the caller's
# error type. No retries here: providers own their retry policy.

from typing import Optional, Type

import requests

DEFAULT_TIMEOUT = 30


def request_json(
        session: Optional[requests.Session],
        method: str,
        url: str,
        *,
        error_cls: Type[Exception] = RuntimeError,
        label: str = "HTTP",
        timeout: float = DEFAULT_TIMEOUT,
        **kwargs,
):
    """
    Returns the decoded JSON body of a 200 response.
    Raises error_cls on transport errors, non-200 status, or invalid JSON.
    """
    http = session or requests

    try:
        resp = http.request(method, url, timeout=timeout, **kwargs)
    except requests.RequestException as e:
        raise error_cls(f"{label} API call failed: {e}") from e

    if resp.status_code != 200:
        raise error_cls(
            f"{label} API call failed: API returned status {resp.status_code}: {resp.text[:500]}"
        )

    try:
        return resp.json()
    except ValueError as e:
        raise error_cls(f"{label} API call failed: invalid JSON response: {e}") from e
