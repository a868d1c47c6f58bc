"""
LectureRooms related functions. The API calls them auditories.
"""

from __future__ import annotations

from typing import List, Optional

import requests

from nure_tools.api import build_url, expect_list, get_json
from nure_tools.config import BASE_URL, LECTURE_ROOMS_PATH
from nure_tools.errors import InvalidLectureRoomName
from nure_tools.model import LectureRoom
from nure_tools.parse import parse_lecture_rooms
from nure_tools.search import filter_by_name, find_exact


def get_lecture_rooms(
    *, base_url: str = BASE_URL, session: Optional[requests.Session] = None
) -> List[LectureRoom]:
    data = get_json(build_url(LECTURE_ROOMS_PATH, base_url), session=session)
    return parse_lecture_rooms(expect_list(data))


def find_lecture_room(
    name: str,
    *,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> List[LectureRoom]:
    rooms = get_lecture_rooms(base_url=base_url, session=session)
    found = filter_by_name(rooms, name, key=lambda r: r.name)
    if not found:
        raise InvalidLectureRoomName(name)
    return found


def find_exact_lecture_room(
    name: str,
    *,
    base_url: str = BASE_URL,
    session: Optional[requests.Session] = None,
) -> LectureRoom:
    room = find_exact(get_lecture_rooms(base_url=base_url, session=session), name, key=lambda r: r.name)
    if room is None:
        raise InvalidLectureRoomName(name)
    return room
