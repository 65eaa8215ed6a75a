[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rgsskit"
version = "0.1.0"
description = "Runtime pieces for RGSS-style role-playing games: configuration, data types, archive and case-insensitive file systems, z-ordering, scene objects, fonts and an event queue."
requires-python = ">=3.11"
dependencies = []
keywords = [
    "rgss",
    "rpg",
    "rpg-maker",
    "rgssad",
    "game-engine",
    "tilemap",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rgsskit"]

[tool.hatch.build.targets.sdist]
include = ["rgsskit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
target-version = "py311"
line-length = 100

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
