[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintreplay"
version = "0.1.0"
description = "Replay viewer for four-player board painting game matches"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "replay", "viewer", "board", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
paintreplay = "paintreplay.render:main"
paintreplay-circle = "paintreplay.geometry:main"

[tool.hatch.build.targets.wheel]
packages = ["paintreplay"]

[tool.pytest.ini_options]
addopts = "-ra"
