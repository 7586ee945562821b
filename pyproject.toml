[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodelifecycle"
version = "0.1.0"
description = "Managed node lifecycle state machine with transition maps and transition-event notifications"
requires-python = ">=3.10"
dependencies = []
keywords = ["lifecycle", "state machine", "managed node", "transitions"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nodelifecycle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
