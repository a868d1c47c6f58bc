"""
nure_tools: a synchronous client for the Mindenit schedule API.

Typical use:

    from nure_tools import find_exact_group, get_schedule, Period

    group = find_exact_group("пзпі-23-2")
    lectures = get_schedule(group, Period.this_week())
"""

from nure_tools.errors import (
    BadResponse,
    FindError,
    GetFailed,
    InvalidGroupName,
    InvalidLectureRoomName,
    InvalidRegexString,
    InvalidReturn,
    InvalidStringProvided,
    InvalidTeacherName,
    InvalidTimestampProvided,
    NotJson,
    NureToolsError,
    ParseError,
    RequestError,
)
from nure_tools.groups import find_exact_group, find_group, get_groups
from nure_tools.lecture_rooms import find_exact_lecture_room, find_lecture_room, get_lecture_rooms
from nure_tools.model import Group, Lecture, LectureRoom, Subject, Teacher
from nure_tools.period import Period
from nure_tools.schedule import ResourceType, get_schedule, get_schedule_by_id
from nure_tools.search import matches
from nure_tools.teachers import find_exact_teacher, find_teacher, get_teachers

__all__ = [
    "BadResponse",
    "FindError",
    "GetFailed",
    "Group",
    "InvalidGroupName",
    "InvalidLectureRoomName",
    "InvalidRegexString",
    "InvalidReturn",
    "InvalidStringProvided",
    "InvalidTeacherName",
    "InvalidTimestampProvided",
    "Lecture",
    "LectureRoom",
    "NotJson",
    "NureToolsError",
    "ParseError",
    "Period",
    "RequestError",
    "ResourceType",
    "Subject",
    "Teacher",
    "find_exact_group",
    "find_exact_lecture_room",
    "find_exact_teacher",
    "find_group",
    "find_lecture_room",
    "find_teacher",
    "get_groups",
    "get_lecture_rooms",
    "get_schedule",
    "get_schedule_by_id",
    "get_teachers",
    "matches",
]
