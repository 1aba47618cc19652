"""The interactive console application: login, sign-up, menu and friends."""

from __future__ import annotations

import argparse
import curses
import time
from pathlib import Path

from campusmate.layout import (
    MenuChoice,
    Rect,
    TextField,
    box_lines,
    friend_buttons,
    friend_label,
    menu_buttons,
    titled_box,
)
from campusmate.records import Member
from campusmate.store import DuplicateIDError, MemberStore, load_friends

_ESCAPE = 27

_ID_FIELD = Rect(26, 8, 60, 8)
_PW_FIELD = Rect(26, 14, 60, 14)
_LOGIN_BUTTON = Rect(27, 20, 37, 20)
_SIGNUP_BUTTON = Rect(45, 20, 60, 20)

_SIGNUP_ROWS = (8, 11, 14)
_CONFIRM_BUTTON = Rect(36, 19, 43, 19)

_MENU_X, _MENU_Y, _MENU_WIDTH, _MENU_HEIGHT = 27, 10, 25, 3
_FRIEND_WIDTH = 40
_BACK_LABEL = "[ 뒤로가기 ]"


class _Quit(Exception):
    """Raised inside the screen loop when the user leaves the application."""


def _key_char(key: int) -> str | None:
    if key in (10, 13, curses.KEY_ENTER):
        return "\r"
    if key in (8, 127, curses.KEY_BACKSPACE):
        return "\b"
    if 32 <= key <= 126:
        return chr(key)
    return None


class App:
    """The application state and its screens."""

    def __init__(self, member_path: str | Path, friends_path: str | Path) -> None:
        self.store = MemberStore(member_path)
        self.friends_path = Path(friends_path)
        self._id_field = TextField()
        self._pw_field = TextField()

    def login(self, user_id: str, password: str) -> Member | None:
        """The member with these credentials, or None."""
        return self.store.authenticate(user_id, password)

    def signup(self, name: str, user_id: str, password: str) -> Member:
        """Register a new member; raises DuplicateIDError for a taken ID."""
        return self.store.register(Member(name, user_id, password))

    def run(self, screen) -> None:
        """Drive the screens on a curses window until Esc is pressed."""
        screen.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS)
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        try:
            while True:
                self._login_screen(screen)
        except _Quit:
            return

    # drawing helpers

    @staticmethod
    def _draw(screen, x: int, y: int, text: str) -> None:
        try:
            screen.addstr(y, x, text)
        except curses.error:
            pass

    def _draw_lines(self, screen, x: int, y: int, lines: list[str]) -> None:
        for offset, line in enumerate(lines):
            self._draw(screen, x, y + offset, line)

    def _new_page(self, screen, framed: bool = True) -> None:
        screen.clear()
        if framed:
            self._draw_lines(screen, 5, 1, box_lines(80, 35))

    # input helpers

    @staticmethod
    def _wait_click(screen) -> tuple[int, int]:
        while True:
            key = screen.getch()
            if key == _ESCAPE:
                raise _Quit
            if key != curses.KEY_MOUSE:
                continue
            try:
                _, x, y, _, state = curses.getmouse()
            except curses.error:
                continue
            if state & (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED):
                return x, y

    @staticmethod
    def _pause(screen) -> None:
        screen.refresh()
        screen.getch()

    def _edit(self, screen, field: TextField, x: int, y: int) -> None:
        self._draw(screen, x, y, " " * len(field.text))
        field.clear()
        while True:
            screen.move(y, x + len(field.text))
            screen.refresh()
            char = _key_char(screen.getch())
            if char is None:
                continue
            done = field.feed(char)
            self._draw(screen, x, y, field.text + " ")
            if done:
                return

    # screens

    def _login_screen(self, screen) -> None:
        self._new_page(screen)
        self._draw_lines(screen, 25, 6, titled_box("로그인: ", 35))
        self._draw_lines(screen, 25, 12, titled_box("비밀번호: ", 35))
        self._draw(screen, 27, 20, "[  로그인  ]")
        self._draw(screen, 45, 20, "[ 회원가입 ]")
        while True:
            x, y = self._wait_click(screen)
            if _SIGNUP_BUTTON.contains(x, y):
                self._signup_screen(screen)
                return
            if _LOGIN_BUTTON.contains(x, y):
                member = self.login(self._id_field.text, self._pw_field.text)
                if member is None:
                    self._draw(screen, 26, 23, "❌ 로그인 실패! 아이디 또는 비밀번호 확인")
                    continue
                self._draw(screen, 26, 23, f"✅ 로그인 성공! 환영합니다, {member.name}님")
                screen.refresh()
                time.sleep(1)
                self._menu_screen(screen, member)
                return
            if _ID_FIELD.contains(x, y):
                self._edit(screen, self._id_field, 26, 8)
            elif _PW_FIELD.contains(x, y):
                self._edit(screen, self._pw_field, 26, 14)

    def _signup_screen(self, screen) -> None:
        self._new_page(screen)
        self._draw(screen, 32, 4, "===== 회원가입 창 =====")
        labels = ("이름: ", "아이디: ", "비밀번호: ")
        fields = [TextField() for _ in labels]
        for label, row, field in zip(labels, _SIGNUP_ROWS, fields):
            self._draw(screen, 25, row, label)
            self._draw_lines(screen, 35, row - 1, box_lines(30, 3))
            self._edit(screen, field, 36, row)
        self._draw(screen, 36, 19, "[ 확인 ]")

        while True:
            x, y = self._wait_click(screen)
            if _CONFIRM_BUTTON.contains(x, y):
                break
            for row, field in zip(_SIGNUP_ROWS, fields):
                if Rect(35, row, 64, row).contains(x, y):
                    self._edit(screen, field, 36, row)
                    break

        name, user_id, password = (field.text for field in fields)
        try:
            self.signup(name, user_id, password)
        except DuplicateIDError:
            self._draw(screen, 30, 23, "❌ 이미 존재하는 아이디입니다.")
            self._draw(screen, 25, 23, "Enter 키를 누르면 로그인 화면으로 이동합니다.")
        except OSError:
            self._draw(screen, 32, 23, "⚠️ 회원가입 실패!")
        else:
            self._draw(screen, 30, 23, "✅ 회원가입 성공!")
            self._draw(screen, 25, 35, "Enter 키를 누르면 로그인 화면으로 이동합니다.")
        self._pause(screen)

    def _menu_screen(self, screen, member: Member) -> None:
        self._new_page(screen)
        self._draw(screen, 32, 4, "===== 메인 메뉴 =====")
        self._draw(screen, 30, 6, f" {member.name}님 환영합니다!")
        buttons = menu_buttons(_MENU_X, _MENU_Y, _MENU_WIDTH, _MENU_HEIGHT)
        for choice, rect in buttons:
            top, _, bottom = box_lines(_MENU_WIDTH, 3)
            self._draw_lines(
                screen, rect.left, rect.top, [top, f"│ {choice.label:<20} │", bottom]
            )

        while True:
            x, y = self._wait_click(screen)
            chosen = next((choice for choice, rect in buttons if rect.contains(x, y)), None)
            if chosen is MenuChoice.TIMETABLE:
                self._new_page(screen, framed=False)
                self._draw(screen, 30, 20, " [나의 시간표 보기] 기능 실행")
                self._pause(screen)
                return
            if chosen is MenuChoice.FRIENDS:
                self._friends_screen(screen)
                return
            if chosen is MenuChoice.LOGOUT:
                self._new_page(screen, framed=False)
                self._draw(screen, 30, 20, " 로그아웃되었습니다.")
                self._pause(screen)
                return

    def _friends_screen(self, screen) -> None:
        self._new_page(screen)
        self._draw(screen, 32, 4, "===== 친구 목록 =====")
        try:
            friends = load_friends(self.friends_path)
        except OSError:
            self._draw(screen, 30, 10, " 친구 목록을 불러올 수 없습니다.")
            self._pause(screen)
            return

        buttons = friend_buttons(friends, 8)
        for friend, rect in buttons:
            top, _, bottom = box_lines(_FRIEND_WIDTH, 3)
            self._draw_lines(
                screen, rect.left, rect.top, [top, friend_label(friend, _FRIEND_WIDTH), bottom]
            )
        back_row = 8 + 4 * len(buttons) + 2
        self._draw(screen, 32, back_row, _BACK_LABEL)
        back_button = Rect(32, back_row, 43, back_row)

        while True:
            x, y = self._wait_click(screen)
            picked = next((friend for friend, rect in buttons if rect.contains(x, y)), None)
            if picked is not None:
                self._new_page(screen, framed=False)
                self._draw(screen, 30, 15, f" '{picked.name}' ({picked.friend_id}) 친구를 선택했습니다.")
                self._pause(screen)
                return
            if back_button.contains(x, y):
                return


def main(argv: list[str] | None = None) -> int:
    """Start the console application."""
    parser = argparse.ArgumentParser(prog="campusmate", description="Campus timetable and friends console.")
    parser.add_argument("--members", default="Member.txt", help="member file")
    parser.add_argument("--friends", default="Friends.txt", help="friend list file")
    args = parser.parse_args(argv)
    app = App(args.members, args.friends)
    try:
        curses.wrapper(app.run)
    except KeyboardInterrupt:
        pass
    return 0