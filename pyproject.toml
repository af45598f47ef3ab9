[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluentstreams"
version = "0.1.0"
description = "Chainable collections and lazily evaluated, thread-backed streams with filter, map and reduce helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "streams", "pipeline", "collections", "map", "filter", "reduce"]
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
packages = ["fluentstreams"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
