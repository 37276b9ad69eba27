[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edfsim"
version = "0.1.0"
description = "Earliest Deadline First scheduling simulator for periodic real-time task sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["edf", "scheduling", "real-time", "simulation", "hyperperiod"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edfsim = "edfsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["edfsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
