[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small numeric and geometric tools: calendar dates, number vectors, 3x3 matrix inversion and 2D shapes"
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "matrix", "inverse", "shapes", "geometry", "vector"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-vector = "labworks.vector:main"
labworks-invert = "labworks.invert:main"
labworks-shapes = "labworks.shape_controller:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
