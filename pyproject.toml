[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transitdesk"
version = "0.1.0"
description = "Back-office records for a bus transport company: buses, employees, routes, conventions, reservations and promotions, kept in SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["transport", "bus", "reservation", "booking", "promotion", "sqlite", "back-office"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transitdesk = "transitdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["transitdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
