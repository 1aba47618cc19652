import pytest

from campusmate.records import Friend, Member
from campusmate.store import (
    DuplicateIDError,
    MemberStore,
    format_member_line,
    load_friends,
    parse_friends,
    parse_member_line,
)


def test_parse_member_line():
    line = "userNAME: Alice / userID: alice / userPW: password\n"
    assert parse_member_line(line) == Member("Alice", "alice", "password")


def test_parse_member_line_keeps_spaces_inside_name():
    line = "userNAME: Kim Min / userID: kim / userPW: password\n"
    assert parse_member_line(line).name == "Kim Min"


@pytest.mark.parametrize(
    "line",
    ["", "garbage\n", "userNAME: Alice / userID: alice\n", "userNAME:  / userID: a / userPW: b\n"],
)
def test_parse_member_line_rejects_malformed(line):
    assert parse_member_line(line) is None


def test_format_member_line():
    member = Member("Alice", "alice", "password")
    assert format_member_line(member) == "userNAME: Alice / userID: alice / userPW: password\n"


def test_format_parse_round_trip():
    member = Member("Lee Soo", "lee", "password")
    assert parse_member_line(format_member_line(member)) == member


def test_parse_friends_groups_of_four():
    text = "alice Bob bob Y\nalice Carol carol N\nalice Dan"
    assert parse_friends(text) == [
        Friend("alice", "Bob", "bob", "Y"),
        Friend("alice", "Carol", "carol", "N"),
    ]


def test_parse_friends_caps_count():
    text = "\n".join(f"alice F{i} f{i} N" for i in range(60))
    friends = parse_friends(text)
    assert len(friends) == 50
    assert friends[-1].name == "F49"


def test_load_friends(tmp_path):
    path = tmp_path / "Friends.txt"
    path.write_text("alice Bob bob Y\n", encoding="utf-8")
    assert load_friends(path) == [Friend("alice", "Bob", "bob", "Y")]


def test_load_friends_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_friends(tmp_path / "missing.txt")


def test_missing_member_file_is_empty(tmp_path):
    store = MemberStore(tmp_path / "Member.txt")
    assert store.members() == []
    assert store.contains("alice") is False
    assert store.authenticate("alice", "password") is None


def test_register_and_authenticate(tmp_path):
    store = MemberStore(tmp_path / "Member.txt")
    member = Member("Alice", "alice", "password")
    assert store.register(member) == member
    assert store.authenticate("alice", "password") == member
    assert store.authenticate("alice", "secret") is None
    assert store.members() == [member]


def test_register_duplicate(tmp_path):
    store = MemberStore(tmp_path / "Member.txt")
    store.register(Member("Alice", "alice", "password"))
    with pytest.raises(DuplicateIDError) as info:
        store.register(Member("Other", "alice", "secret"))
    assert info.value.user_id == "alice"
    assert len(store.members()) == 1


def test_contains_sees_line_without_password(tmp_path):
    path = tmp_path / "Member.txt"
    path.write_text("userNAME: Ghost / userID: ghost\n", encoding="utf-8")
    store = MemberStore(path)
    assert store.contains("ghost") is True
    assert store.members() == []


def test_register_into_directory_fails(tmp_path):
    store = MemberStore(tmp_path)
    with pytest.raises(OSError):
        store.register(Member("Alice", "alice", "password"))