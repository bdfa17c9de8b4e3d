[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Small classic exercises on arrays, rotations, sorting, searching, strings, dynamic programming and text patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "arrays", "sorting", "dynamic-programming", "patterns"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
