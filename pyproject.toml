[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "verletsim"
version = "0.1.0"
description = "A small 2D Verlet point-mass physics engine with distance constraints and rectangle colliders"
requires-python = ">=3.10"
keywords = ["physics", "verlet", "simulation", "constraints", "2d", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["verletsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
