[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathroute"
version = "0.1.0"
description = "Path search over directed address graphs: exhaustive DFS path lists and Dijkstra shortest paths with node blacklists."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "routing", "dijkstra", "dfs", "shortest-path", "base58"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pathroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
