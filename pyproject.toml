[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopack"
version = "0.1.0"
description = "Classic sorting, searching, graph and dynamic-programming algorithms in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "dynamic programming",
    "dijkstra",
    "topological sort",
    "knapsack",
    "fibonacci",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algopack"]

[tool.pytest.ini_options]
addopts = "-ra"
