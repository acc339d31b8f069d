[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Data structures and number theory helpers for contest-style problem solving: segment trees, Fenwick trees, treaps, rolling hashes, heavy-light decomposition and more."
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "data-structures",
    "segment-tree",
    "fenwick",
    "treap",
    "rolling-hash",
    "lca",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
