[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlboil"
version = "2.4.0"
description = "SQL query building, upsert statements, eager loading and pseudo-random test values"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "query-builder", "database", "eager-loading", "test-data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqlboil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
