[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frontierscout"
version = "0.1.0"
description = "Frontier detection, clustering and region tagging on occupancy grids"
requires-python = ">=3.10"
keywords = ["robotics", "exploration", "frontier", "occupancy-grid", "segmentation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = ["numpy"]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["frontierscout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
