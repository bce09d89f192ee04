[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snake2d"
version = "0.1.0"
description = "A small snake arcade game on a software-rendered pixel canvas"
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame", "canvas", "bitmap font"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
snake2d = "snake2d.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snake2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
