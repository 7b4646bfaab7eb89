[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubgrid"
version = "0.1.0"
description = "Character, string, byte-buffer, linked-list and buffered line-reading helpers"
requires-python = ">=3.10"
keywords = ["strings", "bytes", "linked list", "line reader", "ascii"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cubgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
