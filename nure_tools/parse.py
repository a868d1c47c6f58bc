"""
Parsing (JSON -> typed records).

The API payloads are loosely structured: fields go missing, change type,
or arrive as null. The decoders here never fail on a single bad field:

- a field is used only if present AND of the expected JSON type
- otherwise the field falls back to its default (0 / "" / empty / Subject())
- every object is decoded into a fresh record, nothing leaks from the
  previous element of the array
- array elements that are not objects are skipped

Whether the top level is an array at all is checked by the callers
(nure_tools.api.expect_list); given anything else these functions
return an empty list.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from nure_tools.errors import InvalidTimestampProvided
from nure_tools.model import Group, Lecture, LectureRoom, Subject, Teacher
from nure_tools.period import Period, datetime_from_timestamp

logger = logging.getLogger(__name__)

T = TypeVar("T")

# numberPair is a small unsigned ordinal
PAIR_NUMBER_MAX = 255


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _get_int(obj: dict[str, Any], key: str, default: int = 0) -> int:
    value = obj.get(key)
    # bool is an int subclass, but true/false is never a valid id
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


def _get_str(obj: dict[str, Any], key: str, default: str = "") -> str:
    value = obj.get(key)
    if isinstance(value, str):
        return value
    return default


def _get_list(obj: dict[str, Any], key: str) -> list[Any]:
    value = obj.get(key)
    if isinstance(value, list):
        return value
    return []


def _objects(data: Any) -> Iterable[dict[str, Any]]:
    """
    Yield the JSON objects of an array, skipping anything else.
    """
    if not isinstance(data, list):
        logger.debug("Expected a JSON array, got %s", type(data).__name__)
        return
    for index, element in enumerate(data):
        if isinstance(element, dict):
            yield element
        else:
            logger.debug("Skipping element %d: not an object (%s)", index, type(element).__name__)


def _parse_each(data: Any, build: Callable[[dict[str, Any]], T]) -> List[T]:
    return [build(obj) for obj in _objects(data)]


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


def _group(obj: dict[str, Any]) -> Group:
    return Group(id=_get_int(obj, "id"), name=_get_str(obj, "name"))


def _teacher(obj: dict[str, Any]) -> Teacher:
    return Teacher(
        id=_get_int(obj, "id"),
        short_name=_get_str(obj, "shortName"),
        full_name=_get_str(obj, "fullName"),
    )


def _lecture_room(obj: dict[str, Any]) -> LectureRoom:
    return LectureRoom(id=_get_int(obj, "id"), name=_get_str(obj, "name"))


def parse_groups(data: Any) -> List[Group]:
    """
    [{"id": 10887140, "name": "ПЗПІ-23-2"}, ...] -> [Group, ...]
    """
    return _parse_each(data, _group)


def parse_teachers(data: Any) -> List[Teacher]:
    """
    [{"id": 1, "shortName": "Терещенко Г. Ю.", "fullName": "..."}, ...] -> [Teacher, ...]
    """
    return _parse_each(data, _teacher)


def parse_lecture_rooms(data: Any) -> List[LectureRoom]:
    return _parse_each(data, _lecture_room)


def parse_subject(data: Any) -> Subject:
    """
    Decode one subject object; anything that is not an object gives Subject().
    """
    if not isinstance(data, dict):
        return Subject()
    return Subject(
        brief=_get_str(data, "brief"),
        id=_get_int(data, "id"),
        title=_get_str(data, "title"),
    )


# ---------------------------------------------------------------------------
# Schedule (CORE LOGIC)
# ---------------------------------------------------------------------------


def _pair_number(obj: dict[str, Any]) -> int:
    number = _get_int(obj, "numberPair")
    if not 0 <= number <= PAIR_NUMBER_MAX:
        logger.warning("numberPair out of range (%d), using 0", number)
        return 0
    return number


def _time(obj: dict[str, Any], key: str, tz: Optional[tzinfo]) -> Optional[datetime]:
    value = _get_int(obj, key)
    try:
        return datetime_from_timestamp(value, tz)
    except InvalidTimestampProvided:
        logger.warning("%s out of range (%d), ignoring it", key, value)
        return None


def _lecture_period(obj: dict[str, Any], tz: Optional[tzinfo]) -> Period:
    start = _time(obj, "startTime", tz)
    end = _time(obj, "endTime", tz)
    # an unusable side collapses onto the usable one, so start <= end still holds
    if start is None and end is None:
        start = end = datetime_from_timestamp(0, tz)
    elif start is None:
        start = end
    elif end is None:
        end = start
    return Period(start, end)


def parse_lecture(obj: dict[str, Any], tz: Optional[tzinfo] = None) -> Lecture:
    """
    Decode one schedule entry.

    startTime/endTime are unix seconds; they become a Period in `tz`.
    A timestamp that cannot be a date is dropped and the period collapses
    onto the other one (or onto the epoch if both are unusable).
    """
    period = _lecture_period(obj, tz)

    return Lecture(
        room=_get_str(obj, "auditory"),
        period=period,
        pair_number=_pair_number(obj),
        type=_get_str(obj, "type"),
        teachers=tuple(parse_teachers(_get_list(obj, "teachers"))),
        groups=tuple(parse_groups(_get_list(obj, "groups"))),
        subject=parse_subject(obj.get("subject")),
    )


def parse_lectures(data: Any, tz: Optional[tzinfo] = None) -> List[Lecture]:
    return [parse_lecture(obj, tz) for obj in _objects(data)]
