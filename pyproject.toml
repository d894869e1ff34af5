[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mjhelper"
version = "0.1.0"
description = "Riichi mahjong building blocks: tile notation, waits, shanten search trees, yaku detection, opponent tenpai estimates and display data."
requires-python = ">=3.10"
dependencies = []
keywords = ["mahjong", "riichi", "shanten", "yaku", "tenpai", "waits"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mjhelper"]

[tool.hatch.build.targets.sdist]
include = ["mjhelper", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
