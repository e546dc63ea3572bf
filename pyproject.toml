[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sibox"
version = "0.1.0"
description = "Core building blocks for a 2D tile-based game: delegates, input state, tile maps, worlds and entities"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tilemap", "chunks", "delegates", "input", "entities"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sibox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
