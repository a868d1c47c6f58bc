"""
Exceptions raised by nure_tools.

Three families, mirroring where a call can go wrong:

- RequestError: talking to the API (transport, status, body shape)
- FindError: a name lookup found nothing or the search term is unusable
- ParseError: a date/time could not be understood

All of them derive from NureToolsError, so callers can catch everything
from this package with a single except clause. Nothing is retried.
"""

from __future__ import annotations

from typing import Any


class NureToolsError(Exception):
    """Base class for every error raised by this package."""


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class RequestError(NureToolsError):
    pass


class GetFailed(RequestError):
    def __init__(self, url: str = "") -> None:
        self.url = url
        super().__init__(f"Can't get any response from {url}" if url else "Can't get any response")


class NotJson(RequestError):
    def __init__(self, url: str = "") -> None:
        self.url = url
        super().__init__("Got respond not in json format")


class BadResponse(RequestError):
    """Any status other than 200. Keeps the reason phrase and the code."""

    def __init__(self, reason: str, status_code: int) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"API returned with statuscode: {status_code} - {reason}")


class InvalidReturn(RequestError):
    def __init__(self, value: Any = None) -> None:
        self.value = value
        super().__init__("API returned data in unexpected format")


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class FindError(NureToolsError):
    template = "Can't find anything with name: {}"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(self.template.format(value))


class InvalidGroupName(FindError):
    template = "Can't find group with name: {}"


class InvalidLectureRoomName(FindError):
    template = "Can't find lecture room with name: {}"


class InvalidTeacherName(FindError):
    template = "Can't find teacher with name: {}"


class InvalidRegexString(FindError):
    template = "Can't compile Regex from given string: {}"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


class ParseError(NureToolsError, ValueError):
    template = "Can't parse DateTime from: {}"

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(self.template.format(value))


class InvalidStringProvided(ParseError):
    template = "Can't parse DateTime from string: {}"


class InvalidTimestampProvided(ParseError):
    template = "Can't parse DateTime from timestamp: {}"
