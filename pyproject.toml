[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolib"
version = "0.1.0"
description = "Classic competitive-programming algorithms: number theory, dynamic programming, graph traversal, disjoint sets, weighted graphs and segment trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "dynamic-programming",
    "segment-tree",
    "fenwick-tree",
    "disjoint-set",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algolib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
