[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpgarena"
version = "0.1.0"
description = "Core data model for a turn-based role-playing arena: stats, attacks, effects, boss loot tables, visual themes and configuration parameters."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "turn-based", "stats", "theme", "stylesheet", "ini"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rpgarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
