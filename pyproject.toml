[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deepcrawl"
version = "0.1.0"
description = "Small terminal games: a robot mining match, a relic-hunting dungeon crawl, and a few geometry and container exercises."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "roguelike", "mining", "dungeon-crawler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deepcrawl-rectangle = "deepcrawl.geometry:main"
deepcrawl-heaparray = "deepcrawl.heaparray:main"
deepcrawl-deepminer = "deepcrawl.deepminer.game:main"
deepcrawl-oasen = "deepcrawl.oasen.game:main"

[tool.hatch.build.targets.wheel]
packages = ["deepcrawl"]

[tool.pytest.ini_options]
addopts = "-ra"
