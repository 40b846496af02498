[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osekres"
version = "0.1.0"
description = "Model of an OSEK/AUTOSAR OS resource manager with priority ceiling, call-level checks and error codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["osek", "autosar", "rtos", "resource", "priority-ceiling", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["osekres"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
