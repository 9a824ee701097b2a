[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwkit"
version = "0.1.0"
description = "Core runtime for a text user interface toolkit: styles, event loop, timeouts, threading primitives and text utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "event-loop", "styles", "timeouts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
