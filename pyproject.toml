[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docsync"
version = "0.2.1"
description = "Ordered trees and a priority queue for collaborative document sync: a left-leaning red-black tree, a weighted splay tree and a binary heap."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "llrb",
    "red-black tree",
    "splay tree",
    "priority queue",
    "heap",
    "data structures",
    "collaboration",
]
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
packages = ["docsync"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
