[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halfstack"
version = "0.1.0"
description = "City-builder simulation core: shared resources, citizen satisfaction, transport and utilities departments"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "city-builder", "game", "resources", "transport", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["halfstack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
