"""Text-file storage of members and friend lists."""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

from campusmate.records import Friend, Member

MAX_FRIENDS = 50

_MEMBER_RE = re.compile(
    r"userNAME:\s*([^/\s][^/]*?)\s*/\s*userID:\s*(\S+)\s*/\s*userPW:\s*(\S+)"
)
_MEMBER_ID_RE = re.compile(r"userNAME:\s*[^/\s][^/]*/\s*userID:\s*(\S+)")


class DuplicateIDError(ValueError):
    """Raised when registering an ID that is already taken."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"user ID already exists: {user_id}")
        self.user_id = user_id


def parse_member_line(line: str) -> Member | None:
    """Parse one line of the member file, or return None if it is malformed."""
    match = _MEMBER_RE.match(line)
    if match is None:
        return None
    name, user_id, password = match.groups()
    return Member(name, user_id, password)


def format_member_line(member: Member) -> str:
    """Render a member as one line of the member file."""
    return f"userNAME: {member.name} / userID: {member.user_id} / userPW: {member.password}\n"


def parse_friends(text: str) -> list[Friend]:
    """Read whitespace-separated groups of four fields as friends."""
    tokens = text.split()
    friends = [
        Friend(*tokens[start:start + 4])
        for start in range(0, len(tokens) - 3, 4)
    ]
    return friends[:MAX_FRIENDS]


def load_friends(path: str | Path) -> list[Friend]:
    """Load the friend list file at ``path``."""
    return parse_friends(Path(path).read_text(encoding="utf-8"))


class MemberStore:
    """The member file: one member per line, appended on registration."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _lines(self) -> Iterator[str]:
        try:
            with self.path.open(encoding="utf-8") as handle:
                yield from handle
        except FileNotFoundError:
            return

    def members(self) -> list[Member]:
        """All well-formed members, in file order."""
        return [member for line in self._lines() if (member := parse_member_line(line))]

    def authenticate(self, user_id: str, password: str) -> Member | None:
        """Return the first member whose ID and password match, if any."""
        return next(
            (m for m in self.members() if m.user_id == user_id and m.password == password),
            None,
        )

    def contains(self, user_id: str) -> bool:
        """Whether any line of the file already carries ``user_id``."""
        for line in self._lines():
            match = _MEMBER_ID_RE.match(line)
            if match and match.group(1) == user_id:
                return True
        return False

    def register(self, member: Member) -> Member:
        """Append a new member, refusing an ID that is already present."""
        if self.contains(member.user_id):
            raise DuplicateIDError(member.user_id)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(format_member_line(member))
        return member