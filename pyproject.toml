[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "manifoldkit"
version = "0.1.0"
description = "Small utilities for environment variables, filesystem access, strings, bit flags and debug logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "filesystem", "strings", "bitflags", "environment", "debug"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["manifoldkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
