[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "annosim"
version = "0.1.0"
description = "Economy, production, trade and pathfinding simulation for a colonial island-building strategy game"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "economy", "pathfinding", "strategy", "trade"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["annosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
