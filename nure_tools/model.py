"""
Central data model definitions used across the project.

Every record is a frozen dataclass built once by the decoders in
nure_tools.parse and never modified afterwards. to_dict() gives back the
JSON shape the API uses, with the API's own key names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from nure_tools.period import Period


@dataclass(frozen=True)
class Group:
    """
    A student cohort, e.g. "ПЗПІ-23-2".
    """

    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Teacher:
    id: int
    short_name: str
    full_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "shortName": self.short_name, "fullName": self.full_name}


@dataclass(frozen=True)
class LectureRoom:
    """
    An auditory (the API's word for a lecture room).
    """

    id: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Subject:
    """
    Subject of a lecture. Subject() is used when a payload has none.
    """

    brief: str = ""
    id: int = 0
    title: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"brief": self.brief, "id": self.id, "title": self.title}


@dataclass(frozen=True)
class Lecture:
    """
    One scheduled session: where, when, which pair of the day, what kind
    (lecture, lab, ...), who teaches, which groups attend and what subject.
    """

    room: str
    period: Period
    pair_number: int
    type: str
    teachers: tuple[Teacher, ...] = ()
    groups: tuple[Group, ...] = ()
    subject: Subject = field(default_factory=Subject)

    def to_dict(self) -> dict[str, Any]:
        start, end = self.period.timestamps()
        return {
            "auditory": self.room,
            "startTime": start,
            "endTime": end,
            "numberPair": self.pair_number,
            "type": self.type,
            "teachers": [t.to_dict() for t in self.teachers],
            "groups": [g.to_dict() for g in self.groups],
            "subject": self.subject.to_dict(),
        }
