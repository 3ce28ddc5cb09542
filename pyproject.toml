[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netcanvas"
version = "3.2.0"
description = "Scene model for network drawings: node items, edge paths, text items, guides and a web crawler option form."
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "graph", "social network analysis", "visualization", "canvas", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netcanvas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
