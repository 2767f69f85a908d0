[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "cubcaster"
version = "0.1.0"
description = "A small first-person ray-casting maze viewer driven by .cub scene files"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["raycasting", "raycaster", "xpm", "maze", "game", "first-person"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubcaster = "cubcaster.game:main"

[tool.setuptools.packages.find]
include = ["cubcaster*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
