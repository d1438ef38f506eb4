[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isingmc"
version = "0.1.0"
description = "Metropolis Monte Carlo simulation of the 2D square-lattice Ising model"
requires-python = ">=3.10"
dependencies = []
keywords = ["ising", "monte carlo", "metropolis", "statistical physics", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
isingmc = "isingmc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["isingmc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
