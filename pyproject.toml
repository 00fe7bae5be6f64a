[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmxtiles"
version = "0.1.0"
description = "Parse tiles, tilesets and tile layers from Tiled TMX map files"
requires-python = ">=3.10"
dependencies = []
keywords = ["tmx", "tsx", "tiled", "tilemap", "tileset", "game", "map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tmxtiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
