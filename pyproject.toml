[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spellseeker"
version = "0.1.0"
description = "Game logic for a spellcasting dungeon crawler: random-walk grid dungeons, enemies, a spell inventory and an enemy roster"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "procedural-generation", "inventory", "rpg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spellseeker"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
