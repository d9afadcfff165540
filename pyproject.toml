[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphkit"
version = "0.1.0"
description = "Small, dependency-free graph and grid algorithms: traversals, cycles, topological order, bipartiteness, components, flood fill and islands."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "dfs",
    "topological-sort",
    "cycle-detection",
    "bipartite",
    "flood-fill",
    "islands",
    "adjacency-matrix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphkit-matrix = "graphkit.representation:main"

[tool.hatch.build.targets.wheel]
packages = ["graphkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
