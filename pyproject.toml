[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterkit"
version = "0.1.0"
description = "Classic 2D raster graphics algorithms: line drawing, circles, fills, transformations, clipping and curves"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterization",
    "bresenham",
    "dda",
    "midpoint-circle",
    "flood-fill",
    "cohen-sutherland",
    "sutherland-hodgman",
    "bezier",
    "koch",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rasterkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
