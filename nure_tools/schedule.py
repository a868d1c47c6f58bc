"""
Schedule related functions.

A schedule is requested for one group, teacher or lecture room over a
Period:

    GET /schedule/{groups|teachers|auditories}/{id}?start=<unix>&end=<unix>

The response is a JSON array of lectures, decoded by parse_lectures().
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from enum import Enum
from typing import List, Optional, Union

import requests

from nure_tools.api import build_url, expect_list, get_json
from nure_tools.config import BASE_URL, SCHEDULE_PATH
from nure_tools.model import Group, Lecture, LectureRoom, Teacher
from nure_tools.parse import parse_lectures
from nure_tools.period import Period

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    GROUPS = "groups"
    TEACHERS = "teachers"
    LECTURE_ROOMS = "auditories"


ScheduleTarget = Union[Group, Teacher, LectureRoom]


def _resource_of(target: ScheduleTarget) -> tuple[ResourceType, int]:
    if isinstance(target, Group):
        return ResourceType.GROUPS, target.id
    if isinstance(target, Teacher):
        return ResourceType.TEACHERS, target.id
    if isinstance(target, LectureRoom):
        return ResourceType.LECTURE_ROOMS, target.id
    raise TypeError(f"Cannot request a schedule for {type(target).__name__}")


def get_schedule_by_id(
    resource_type: Union[ResourceType, str],
    resource_id: int,
    period: Period,
    *,
    tz: Optional[tzinfo] = None,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> List[Lecture]:
    """
    Schedule of one resource identified by type and numeric id.

    Raises GetFailed, BadResponse, NotJson or InvalidReturn; ValueError for
    an unknown resource type.
    """
    kind = ResourceType(resource_type)
    start, end = period.timestamps()

    path = SCHEDULE_PATH.format(resource_type=kind.value, resource_id=resource_id)
    data = get_json(build_url(path, base_url), params={"start": start, "end": end}, session=session)

    lectures = parse_lectures(expect_list(data), tz=tz)
    logger.debug("Schedule %s/%s: %d lectures", kind.value, resource_id, len(lectures))
    return lectures


def get_schedule(
    target: ScheduleTarget,
    period: Period,
    *,
    tz: Optional[tzinfo] = None,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> List[Lecture]:
    """
    Schedule of a Group, Teacher or LectureRoom over `period`.

        group = find_exact_group("пзпі-23-2")
        lectures = get_schedule(group, Period.from_strings("2024-01-02", "2024-01-03"))
    """
    kind, resource_id = _resource_of(target)
    return get_schedule_by_id(kind, resource_id, period, tz=tz, base_url=base_url, session=session)
