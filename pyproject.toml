[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeray"
version = "0.1.0"
description = "A small grid-based snake arcade game with a main menu, food, score and sound."
requires-python = ">=3.10"
keywords = ["snake", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
snakeray = "snakeray.game:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
