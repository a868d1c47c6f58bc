"""
Teachers related functions.

Search uses the full name ("Новіков", "Гліб"), exact lookup uses the
short form the timetable prints ("Терещенко Г. Ю.").
"""

from __future__ import annotations

from typing import List, Optional

import requests

from nure_tools.api import build_url, expect_list, get_json
from nure_tools.config import BASE_URL, TEACHERS_PATH
from nure_tools.errors import InvalidTeacherName
from nure_tools.model import Teacher
from nure_tools.parse import parse_teachers
from nure_tools.search import filter_by_name, find_exact


def get_teachers(*, base_url: str = BASE_URL, session: Optional[requests.Session] = None) -> List[Teacher]:
    data = get_json(build_url(TEACHERS_PATH, base_url), session=session)
    return parse_teachers(expect_list(data))


def find_teacher(
    name: str,
    *,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> List[Teacher]:
    """
    Teachers whose full name matches the regex `name`.

    Raises InvalidTeacherName when nothing matches.
    """
    teachers = get_teachers(base_url=base_url, session=session)
    found = filter_by_name(teachers, name, key=lambda t: t.full_name)
    if not found:
        raise InvalidTeacherName(name)
    return found


def find_exact_teacher(
    name: str,
    *,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> Teacher:
    """
    The teacher whose short name equals `name` (case-insensitive).
    """
    teacher = find_exact(get_teachers(base_url=base_url, session=session), name, key=lambda t: t.short_name)
    if teacher is None:
        raise InvalidTeacherName(name)
    return teacher
