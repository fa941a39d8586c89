[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hlsmodels"
version = "0.1.0"
description = "Bit-accurate Python reference models of high-level-synthesis coding examples"
requires-python = ">=3.10"
dependencies = []
keywords = ["hls", "fixed-point", "arbitrary-precision", "fpga", "reference-model", "dataflow"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["hlsmodels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
