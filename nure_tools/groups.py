"""
Groups related functions.

    get_groups()                 all groups
    find_group("пі-23")          groups whose name matches a regex
    find_exact_group("пзпі-23-2") the one group with exactly that name
"""

from __future__ import annotations

from typing import List, Optional

import requests

from nure_tools.api import build_url, expect_list, get_json
from nure_tools.config import BASE_URL, GROUPS_PATH
from nure_tools.errors import InvalidGroupName
from nure_tools.model import Group
from nure_tools.parse import parse_groups
from nure_tools.search import filter_by_name, find_exact


def get_groups(*, base_url: str = BASE_URL, session: Optional[requests.Session] = None) -> List[Group]:
    """
    Fetch all existing groups.

    Raises GetFailed, BadResponse, NotJson or InvalidReturn.
    """
    data = get_json(build_url(GROUPS_PATH, base_url), session=session)
    return parse_groups(expect_list(data))


def find_group(
    name: str,
    *,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> List[Group]:
    """
    Return every group whose name matches `name` (a case-insensitive regex).

    Raises InvalidGroupName when nothing matches and InvalidRegexString
    when `name` is not a valid pattern.
    """
    groups = get_groups(base_url=base_url, session=session)
    found = filter_by_name(groups, name, key=lambda g: g.name)
    if not found:
        raise InvalidGroupName(name)
    return found


def find_exact_group(
    name: str,
    *,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> Group:
    """
    Return the group named exactly `name` (case-insensitive).
    """
    group = find_exact(get_groups(base_url=base_url, session=session), name, key=lambda g: g.name)
    if group is None:
        raise InvalidGroupName(name)
    return group
