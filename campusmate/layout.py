"""Screen geometry: boxes, buttons, hit areas and text fields."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from collections.abc import Sequence

from campusmate.records import Friend


@dataclass(frozen=True)
class Rect:
    """An inclusive rectangle of character cells."""

    left: int
    top: int
    right: int
    bottom: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the cell (x, y) lies inside, edges included."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class MenuChoice(enum.Enum):
    """Entries of the main menu, in display order."""

    TIMETABLE = "1. 나의 시간표 보기"
    FRIENDS = "2. 친구 목록 보기"
    LOGOUT = "3. 로그아웃"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class TextField:
    """A single-line ASCII input that grows as keys are fed to it."""

    max_len: int = 49
    text: str = ""

    def feed(self, key: str) -> bool:
        """Apply one key; return True when Enter finishes the input."""
        if key in ("\r", "\n"):
            return True
        if key == "\b":
            self.text = self.text[:-1]
        elif len(key) == 1 and 32 <= ord(key) <= 126 and len(self.text) < self.max_len:
            self.text += key
        return False

    def clear(self) -> None:
        """Empty the field."""
        self.text = ""


def box_lines(width: int, height: int) -> list[str]:
    """The rows of a box drawn with line characters."""
    if width < 2 or height < 2:
        raise ValueError("a box needs a width and height of at least 2")
    inner = width - 2
    middle = ["│" + " " * inner + "│"] * (height - 2)
    return ["┌" + "─" * inner + "┐", *middle, "└" + "─" * inner + "┘"]


def titled_box(label: str, width: int) -> list[str]:
    """A label followed by a one-line input box below it."""
    return [label, *box_lines(width, 3)]


def menu_buttons(start_x: int, start_y: int, width: int, height: int) -> list[tuple[MenuChoice, Rect]]:
    """Hit areas of the main menu buttons, stacked downwards."""
    buttons = []
    for index, choice in enumerate(MenuChoice):
        top = start_y + index * (height + 2)
        buttons.append((choice, Rect(start_x, top, start_x + width, top + height)))
    return buttons


def friend_buttons(friends: Sequence[Friend], start_y: int = 8) -> list[tuple[Friend, Rect]]:
    """Hit areas of the friend list buttons, one every four rows."""
    return [
        (friend, Rect(20, top, 60, top + 3))
        for friend, top in zip(friends, range(start_y, start_y + 4 * len(friends), 4))
    ]


def friend_label(friend: Friend, width: int) -> str:
    """The middle row of a friend button, padded to the button width."""
    row = f"│ {friend.name:<10} (ID: {friend.friend_id}) │"
    padding = max(0, width - 2 - (len(friend.name) + len(friend.friend_id) + 9))
    return row + " " * padding