[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreak"
version = "1.0.0"
description = "A terminal brick-breaking game with single-player, battle and computer-versus-computer modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "breakout", "bricks", "curses", "terminal", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brickbreak = "brickbreak.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["brickbreak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
