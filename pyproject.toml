[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tristram"
version = "0.1.0"
description = "Level file readers, isometric geometry, software surfaces and small utilities for an isometric role-playing game engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "level", "dun", "min", "isometric", "rpg", "md5", "ini"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tristram"]

[tool.pytest.ini_options]
addopts = "-ra"
