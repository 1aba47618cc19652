[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campusmate"
version = "0.1.0"
description = "Terminal student portal with member sign-up, login, a main menu and a friends list"
requires-python = ">=3.10"
dependencies = []
keywords = ["timetable", "students", "terminal", "curses", "login", "friends"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Natural Language :: Korean",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
campusmate = "campusmate.app:main"

[tool.hatch.build.targets.wheel]
packages = ["campusmate"]

[tool.pytest.ini_options]
addopts = "-ra"
