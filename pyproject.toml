[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wargear"
version = "0.1.0"
description = "Stat arithmetic, attack-power heuristics and gear pruning for melee DPS theorycrafting"
requires-python = ">=3.10"
dependencies = []
keywords = ["theorycrafting", "gear", "optimizer", "heuristics", "rpg"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wargear"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
