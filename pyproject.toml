[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maccormack"
version = "0.1.0"
description = "Two-dimensional hydrodynamics and ideal MHD solver using the MacCormack predictor-corrector scheme"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["cfd", "hydrodynamics", "mhd", "maccormack", "finite-difference", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
maccormack = "maccormack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["maccormack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
