[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chancap"
version = "0.1.0"
description = "Pure-Python double-precision SIMD-oriented Fast Mersenne Twister (dSFMT) random number generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsfmt", "mersenne twister", "random numbers", "prng"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chancap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
