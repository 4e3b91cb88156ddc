[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmime"
version = "0.2.0"
description = "Building blocks for MIME message handling: a doubly linked list and line-break and boundary scanning helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["mime", "email", "multipart", "boundary", "linked list", "line break"]
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
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
