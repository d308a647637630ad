[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moors"
version = "0.1.0"
description = "Genetic operators for evolutionary optimisation on NumPy arrays: sampling, crossover, mutation and tournament selection."
requires-python = ">=3.10"
keywords = ["evolutionary", "genetic algorithm", "optimization", "multi-objective", "crossover", "mutation", "selection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["moors"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
