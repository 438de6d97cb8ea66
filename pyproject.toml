[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antcolony"
version = "0.1.0"
description = "A year-by-year ant colony simulation with roles, resources, enemies and disasters"
requires-python = ">=3.10"
keywords = ["simulation", "game", "ants", "colony", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
antcolony = "antcolony.game:main"

[tool.hatch.build.targets.wheel]
packages = ["antcolony"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
