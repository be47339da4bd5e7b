[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bolognaise"
version = "0.1.0"
description = "Building blocks for factory layout planning with wave-function-collapse style superpositions of buildings, items and recipes"
requires-python = ">=3.10"
keywords = ["factory", "layout", "wave-function-collapse", "grid", "simulation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bolognaise = "bolognaise.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bolognaise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
