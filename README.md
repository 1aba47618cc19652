# campusmate

A small terminal portal for students, drawn with box characters in a
curses window. From the login screen you can sign up, log in, open a main
menu and browse a friends list. All screens are driven by the mouse.

## Install

```
pip install .
```

The screens use Python's `curses` module with mouse support, which is part
of the standard library on Linux and macOS.

## Run

```
campusmate [--members PATH] [--friends PATH]
```

- `--members` is the member file (default `Member.txt`).
- `--friends` is the friends file (default `Friends.txt`).

Press Esc while a screen waits for a click to leave the program. Ctrl-C
also quits.

## Screens

The login screen has an ID box, a password box, a `[  로그인  ]` (log in)
button and a `[ 회원가입 ]` (sign up) button. Click a box with the left
mouse button and type into it. Clicking a box empties it first. Enter
finishes the field and Backspace removes the last character. A field takes
printable ASCII only, up to 49 characters. What you typed in the login
boxes stays there when you come back to the login screen.

- **Sign up** asks for a name, an ID and a password in turn. After that you
  can click a box to type it again, then click `[ 확인 ]` to save. An ID
  that is already in the member file is refused. Either way, the next key
  takes you back to the login screen.
- **Log in** checks the ID and password against the member file. A wrong
  pair shows a failure message and you stay on the login screen. A right
  pair greets you by name and opens the main menu.
- **Main menu** has three buttons: `1. 나의 시간표 보기` (my timetable),
  `2. 친구 목록 보기` (friends list) and `3. 로그아웃` (log out). The
  timetable button only shows a notice. Log out shows a message. After any
  of them, you are back at the login screen.
- **Friends list** shows each friend as a button. Click one to see which
  friend you picked, or click `[ 뒤로가기 ]` to go back. If the friends
  file cannot be read, a message says so.

## Data files

Members are stored one per line in UTF-8 plain text, and new members are
appended:

```
userNAME: Hong Gildong / userID: hong / userPW: password
```

Lines that do not have this shape are ignored. Passwords are kept as
written, without hashing.

The friends file holds whitespace-separated records of four fields each:
owner ID, friend name, friend ID and a favourite flag. At most 50 friends
are read. A trailing group of fewer than four fields is dropped.

## Using it as a library

```python
from campusmate.records import Member
from campusmate.store import DuplicateIDError, MemberStore, load_friends

store = MemberStore("Member.txt")
try:
    store.register(Member("Hong Gildong", "hong", "password"))
except DuplicateIDError as error:
    print("taken:", error.user_id)

print(store.authenticate("hong", "password"))  # Member or None
print(store.contains("hong"))                  # True
print(store.members())                         # all well-formed members

friends = load_friends("Friends.txt")           # list of Friend
```

- `campusmate.records` holds the frozen dataclasses `Member`,
  `TimetableEntry`, `Subject` and `Friend`.
- `campusmate.store` has `parse_member_line`, `format_member_line`,
  `parse_friends`, `load_friends`, `MemberStore` and `DuplicateIDError`
  (a subclass of `ValueError`). A missing member file reads as empty.
- `campusmate.layout` has the screen geometry: `Rect` (an inclusive cell
  rectangle with `contains`), `TextField` (`feed` a key, `clear`),
  `MenuChoice`, `box_lines`, `titled_box`, `menu_buttons`, `friend_buttons`
  and `friend_label`.
- `campusmate.app.App` puts the screens together. Its `login` and `signup`
  methods work without a terminal, and `run(screen)` drives a curses
  window. `campusmate.app.main` is the `campusmate` command.

## What it does not do

- There is no timetable. `TimetableEntry` and `Subject` are records only.
  Nothing reads, stores or shows them, and the timetable menu entry only
  prints a notice.
- The friends screen lists every record in the friends file. It does not
  filter by the logged-in user, and it does not use the favourite flag.
  Picking a friend only shows a message.
- There is no keyboard-only navigation. Buttons and boxes need mouse clicks.

## Tests

```
pip install .[test]
pytest
```