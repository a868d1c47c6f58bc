"""
Tests for the query functions (groups, teachers, lecture rooms, schedule).

The network is replaced by a mock session whose get() returns canned
requests.Response objects, so every test also checks the URL that
would have been requested.
"""

import json
import unittest
from typing import Any
from unittest import mock

import requests

from nure_tools.errors import (
    BadResponse,
    InvalidGroupName,
    InvalidLectureRoomName,
    InvalidRegexString,
    InvalidReturn,
    InvalidTeacherName,
)
from nure_tools.groups import find_exact_group, find_group, get_groups
from nure_tools.lecture_rooms import find_exact_lecture_room, find_lecture_room, get_lecture_rooms
from nure_tools.model import Group, LectureRoom, Teacher
from nure_tools.period import Period
from nure_tools.schedule import ResourceType, get_schedule, get_schedule_by_id
from nure_tools.teachers import find_exact_teacher, find_teacher, get_teachers


GROUPS = [
    {"id": 10887140, "name": "ПЗПІ-23-2"},
    {"id": 10887141, "name": "ПЗПІ-23-3"},
    {"id": 10304333, "name": "КІУКІ-22-1"},
]
TEACHERS = [
    {"id": 5, "shortName": "Терещенко Г. Ю.", "fullName": "Терещенко Гліб Юрійович"},
    {"id": 6, "shortName": "Новіков О. В.", "fullName": "Новіков Олег Володимирович"},
]
ROOMS = [{"id": 1, "name": "287"}, {"id": 2, "name": "ФЛ_1"}, {"id": 3, "name": "285и"}]
LECTURES = [
    {
        "auditory": "287",
        "startTime": 1704177900,
        "endTime": 1704183600,
        "numberPair": 2,
        "type": "Лк",
        "teachers": TEACHERS[:1],
        "groups": GROUPS[:2],
        "subject": {"brief": "ОП", "id": 7, "title": "Основи програмування"},
    }
]


def _response(payload: Any, status: int = 200, reason: str = "OK") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp._content = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


def _session(payload: Any, status: int = 200, reason: str = "OK") -> mock.Mock:
    session = mock.Mock()
    session.get.return_value = _response(payload, status, reason)
    return session


class TestGroups(unittest.TestCase):
    def test_get_groups(self) -> None:
        session = _session(GROUPS)
        groups = get_groups(session=session)

        self.assertEqual(len(groups), 3)
        self.assertEqual(groups[0], Group(10887140, "ПЗПІ-23-2"))
        url = session.get.call_args[0][0]
        self.assertEqual(url, "https://api.mindenit.tech/lists/groups")

    def test_base_url_override(self) -> None:
        session = _session(GROUPS)
        get_groups(base_url="http://localhost:8080/", session=session)
        self.assertEqual(session.get.call_args[0][0], "http://localhost:8080/lists/groups")

    def test_find_group(self) -> None:
        found = find_group("пзпі-23", session=_session(GROUPS))
        self.assertEqual([g.id for g in found], [10887140, 10887141])

    def test_find_group_no_match_carries_input(self) -> None:
        with self.assertRaises(InvalidGroupName) as ctx:
            find_group("ФІТ-99", session=_session(GROUPS))
        self.assertEqual(ctx.exception.value, "ФІТ-99")
        self.assertEqual(str(ctx.exception), "Can't find group with name: ФІТ-99")

    def test_find_group_bad_regex(self) -> None:
        with self.assertRaises(InvalidRegexString):
            find_group("(", session=_session(GROUPS))

    def test_find_exact_group(self) -> None:
        self.assertEqual(find_exact_group("пзпі-23-3", session=_session(GROUPS)).id, 10887141)
        with self.assertRaises(InvalidGroupName):
            find_exact_group("пзпі-23", session=_session(GROUPS))

    def test_object_instead_of_array(self) -> None:
        with self.assertRaises(InvalidReturn):
            get_groups(session=_session({"message": "rate limited"}))

    def test_not_found_status(self) -> None:
        with self.assertRaises(BadResponse) as ctx:
            get_groups(session=_session({}, status=404, reason="Not Found"))
        self.assertEqual((ctx.exception.reason, ctx.exception.status_code), ("Not Found", 404))


class TestTeachers(unittest.TestCase):
    def test_get_teachers(self) -> None:
        session = _session(TEACHERS)
        teachers = get_teachers(session=session)
        self.assertEqual(teachers[1], Teacher(6, "Новіков О. В.", "Новіков Олег Володимирович"))
        self.assertEqual(session.get.call_args[0][0], "https://api.mindenit.tech/teachers")

    def test_find_teacher_searches_full_name(self) -> None:
        found = find_teacher("гліб", session=_session(TEACHERS))
        self.assertEqual([t.id for t in found], [5])

    def test_find_teacher_no_match(self) -> None:
        with self.assertRaises(InvalidTeacherName) as ctx:
            find_teacher("Шевченко", session=_session(TEACHERS))
        self.assertEqual(ctx.exception.value, "Шевченко")

    def test_find_exact_teacher_uses_short_name(self) -> None:
        self.assertEqual(find_exact_teacher("терещенко г. ю.", session=_session(TEACHERS)).id, 5)
        with self.assertRaises(InvalidTeacherName):
            find_exact_teacher("Терещенко Гліб Юрійович", session=_session(TEACHERS))


class TestLectureRooms(unittest.TestCase):
    def test_get_lecture_rooms(self) -> None:
        session = _session(ROOMS)
        rooms = get_lecture_rooms(session=session)
        self.assertEqual(rooms[1], LectureRoom(2, "ФЛ_1"))
        self.assertEqual(session.get.call_args[0][0], "https://api.mindenit.tech/auditories")

    def test_find_lecture_room(self) -> None:
        found = find_lecture_room("^28", session=_session(ROOMS))
        self.assertEqual([r.name for r in found], ["287", "285и"])

    def test_find_lecture_room_no_match(self) -> None:
        with self.assertRaises(InvalidLectureRoomName):
            find_lecture_room("999", session=_session(ROOMS))

    def test_find_exact_lecture_room(self) -> None:
        self.assertEqual(find_exact_lecture_room("фл_1", session=_session(ROOMS)).id, 2)
        with self.assertRaises(InvalidLectureRoomName):
            find_exact_lecture_room("28", session=_session(ROOMS))


class TestSchedule(unittest.TestCase):
    PERIOD = Period.from_timestamps(1704146400, 1704232800)

    def test_schedule_for_group(self) -> None:
        session = _session(LECTURES)
        lectures = get_schedule(Group(10887140, "ПЗПІ-23-2"), self.PERIOD, session=session)

        session.get.assert_called_once_with(
            "https://api.mindenit.tech/schedule/groups/10887140",
            params={"start": 1704146400, "end": 1704232800},
            timeout=30,
        )
        self.assertEqual(len(lectures), 1)
        self.assertEqual(lectures[0].room, "287")
        self.assertEqual(lectures[0].subject.brief, "ОП")

    def test_resource_type_per_target(self) -> None:
        cases = [
            (Teacher(5, "Терещенко Г. Ю.", ""), "https://api.mindenit.tech/schedule/teachers/5"),
            (LectureRoom(1, "287"), "https://api.mindenit.tech/schedule/auditories/1"),
        ]
        for target, url in cases:
            with self.subTest(target=target):
                session = _session([])
                self.assertEqual(get_schedule(target, self.PERIOD, session=session), [])
                self.assertEqual(session.get.call_args[0][0], url)

    def test_unsupported_target(self) -> None:
        with self.assertRaises(TypeError):
            get_schedule("ПЗПІ-23-2", self.PERIOD, session=_session([]))  # type: ignore[arg-type]

    def test_schedule_by_id(self) -> None:
        session = _session(LECTURES)
        get_schedule_by_id("auditories", 3, self.PERIOD, session=session)
        self.assertEqual(session.get.call_args[0][0], "https://api.mindenit.tech/schedule/auditories/3")

        get_schedule_by_id(ResourceType.TEACHERS, 6, self.PERIOD, session=session)
        self.assertEqual(session.get.call_args[0][0], "https://api.mindenit.tech/schedule/teachers/6")

    def test_unknown_resource_type(self) -> None:
        with self.assertRaises(ValueError):
            get_schedule_by_id("students", 1, self.PERIOD, session=_session([]))

    def test_schedule_invalid_return(self) -> None:
        with self.assertRaises(InvalidReturn):
            get_schedule(Group(1, "A"), self.PERIOD, session=_session({"lectures": []}))


if __name__ == "__main__":
    unittest.main()
