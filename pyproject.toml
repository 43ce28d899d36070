[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitsim"
version = "0.1.0"
description = "A small two-dimensional satellite orbit simulator with a headless drawing model"
requires-python = ">=3.10"
dependencies = []
keywords = ["orbit", "simulation", "physics", "satellite", "gravity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orbitsim = "orbitsim.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitsim"]

[tool.pytest.ini_options]
addopts = "-ra"
