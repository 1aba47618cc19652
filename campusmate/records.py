"""Plain records kept by the application: members, timetables, subjects, friends."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """A registered user."""

    name: str
    user_id: str
    password: str


@dataclass(frozen=True)
class TimetableEntry:
    """One subject on a user's timetable."""

    user_id: str
    subject_id: str


@dataclass(frozen=True)
class Subject:
    """A subject that can be placed on a timetable."""

    subject_id: str
    name: str
    category: str
    professor: str
    weekday: str
    time: str


@dataclass(frozen=True)
class Friend:
    """An entry of a user's friend list."""

    owner_id: str
    name: str
    friend_id: str
    pin: str