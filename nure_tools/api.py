"""
HTTP access to the Mindenit API.

get_json() performs exactly one blocking GET and classifies the outcome:

- transport failure        -> GetFailed
- status != 200            -> BadResponse(reason, status_code)
- 200 but body is not JSON -> NotJson
- 200 with JSON            -> the decoded value

There is no retry and no caching; every call hits the network.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from nure_tools.config import BASE_URL, REQUEST_TIMEOUT
from nure_tools.errors import BadResponse, GetFailed, InvalidReturn, NotJson

logger = logging.getLogger(__name__)


def build_url(path: str, base_url: str = BASE_URL) -> str:
    """
    Join the API base and a resource path ("/teachers").
    """
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def unwrap_response(response: requests.Response) -> Any:
    """
    Turn a received response into decoded JSON, or raise.
    """
    if response.status_code != 200:
        raise BadResponse(response.reason or "", response.status_code)

    try:
        return response.json()
    except ValueError as exc:
        # requests' JSONDecodeError is a ValueError on every backend
        raise NotJson(response.url or "") from exc


def get_json(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Any:
    """
    GET `url` and return its JSON body.

    A requests.Session may be passed to reuse connections across calls;
    otherwise the module-level requests.get is used.
    """
    getter = session.get if session is not None else requests.get

    logger.debug("GET %s params=%s", url, dict(params) if params else {})
    try:
        resp = getter(url, params=params, timeout=timeout)
    except requests.RequestException as exc:
        raise GetFailed(url) from exc

    logger.debug("GET %s -> %s", url, resp.status_code)
    return unwrap_response(resp)


def expect_list(value: Any) -> list[Any]:
    """
    All list endpoints return a JSON array at the top level.
    """
    if not isinstance(value, list):
        raise InvalidReturn(value)
    return value
