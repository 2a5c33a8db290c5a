[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robutils"
version = "0.1.0"
description = "Small utilities: string helpers, string arrays and maps, time points, process info and growable buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "strings", "string-map", "time", "buffers"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
