[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uzemie"
version = "0.1.0"
description = "Territorial units with yearly population data, loaded from CSV into a navigable hierarchy, plus the sequence, stack, array and sort structures behind them."
requires-python = ">=3.10"
dependencies = []
keywords = ["population", "census", "hierarchy", "territorial units", "data structures", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uzemie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
