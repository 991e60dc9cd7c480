[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turbolib"
version = "0.1.0"
description = "Small, readable implementations of classic data structures, algorithms and object-oriented design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "hash-table",
    "linked-list",
    "queue",
    "stack",
    "binary-search-tree",
    "fibonacci",
    "threading",
    "design-patterns",
    "builder",
    "factory",
    "singleton",
    "dependency-injection",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["turbolib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
