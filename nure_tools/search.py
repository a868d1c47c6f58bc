r"""
Name matching for the find_* lookups.

matches() treats the search term as a regular expression, not as a
literal: "пі-2." matches "пзпі-23" and "(" is rejected. Callers that want
literal matching must re.escape() the term themselves.

The pattern is lower-cased before it is compiled, so upper-case escape
classes turn into their lower-case opposites: \D behaves as \d, \S as \s,
\W as \w. r"\D+" matches "123" and r"\S" does not match "abc".

Exact lookups (find_exact_*) do not use regexes at all; they compare
whole names case-insensitively.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List, Optional, TypeVar

from nure_tools.errors import InvalidRegexString

T = TypeVar("T")


def matches(needle: str, haystack: str) -> bool:
    """
    True if the regex `needle` matches anywhere in `haystack`, ignoring case.

    Raises InvalidRegexString if `needle` does not compile.
    """
    try:
        pattern = re.compile(needle.lower())
    except re.error as exc:
        raise InvalidRegexString(needle) from exc
    return pattern.search(haystack.lower()) is not None


def filter_by_name(items: Iterable[T], needle: str, key: Callable[[T], str]) -> List[T]:
    """
    Keep the items whose name (as returned by `key`) matches `needle`.
    """
    # compile once up front so a bad pattern fails even for an empty list
    matches(needle, "")
    return [item for item in items if matches(needle, key(item))]


def find_exact(items: Iterable[T], name: str, key: Callable[[T], str]) -> Optional[T]:
    """
    First item whose name equals `name` case-insensitively, else None.
    """
    wanted = name.lower()
    for item in items:
        if key(item).lower() == wanted:
            return item
    return None
