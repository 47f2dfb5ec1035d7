[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cube5"
version = "0.1.0"
description = "5x5x5 puzzle cube state model with move notation and net image rendering"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["puzzle", "cube", "5x5x5", "speffz", "move-notation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cube5 = "cube5.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cube5"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
