[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wuziqi"
version = "0.1.0"
description = "Gomoku (five in a row) for two players or against a scoring computer opponent, with a Tkinter board"
requires-python = ">=3.10"
dependencies = []
keywords = ["gomoku", "wuziqi", "five-in-a-row", "board game", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wuziqi = "wuziqi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wuziqi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
