[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weatherstats"
version = "0.1.0"
description = "Summarise station temperature measurements into min/mean/max per station"
requires-python = ">=3.10"
dependencies = []
keywords = ["measurements", "temperature", "aggregation", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weatherstats = "weatherstats.aggregate:main"
weatherstats-generate = "weatherstats.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["weatherstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
