import dataclasses

import pytest

from campusmate.records import Friend, Member, Subject, TimetableEntry


def test_member_fields_in_order():
    member = Member("Alice", "alice", "password")
    assert (member.name, member.user_id, member.password) == ("Alice", "alice", "password")


def test_member_is_frozen():
    member = Member("Alice", "alice", "password")
    with pytest.raises(dataclasses.FrozenInstanceError):
        member.name = "Bob"
    assert member.name == "Alice"
    assert member == Member("Alice", "alice", "password")


def test_records_compare_by_value():
    assert Friend("alice", "Bob", "bob", "Y") == Friend("alice", "Bob", "bob", "Y")
    assert TimetableEntry("alice", "CS101") != TimetableEntry("alice", "CS102")


def test_records_are_hashable():
    subjects = {
        Subject("CS101", "Intro", "Major", "Kim", "Mon", "09:00"),
        Subject("CS101", "Intro", "Major", "Kim", "Mon", "09:00"),
    }
    assert len(subjects) == 1


def test_friend_fields():
    friend = Friend("alice", "Bob", "bob", "N")
    assert dataclasses.astuple(friend) == ("alice", "Bob", "bob", "N")