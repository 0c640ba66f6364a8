[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapekit"
version = "0.1.0"
description = "Geometry toolkit: STL meshes, triangle intersection, Bezier curves, polygon booleans and B-rep sketching"
requires-python = ">=3.10"
keywords = ["geometry", "stl", "obj", "bezier", "polygon", "boolean", "extrusion", "sketch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "shapely",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["shapekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
