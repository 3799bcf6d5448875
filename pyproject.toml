[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heatmapper"
version = "0.1.0"
description = "Render gridded height samples as colour heatmap BMP images using nearest-neighbour or bilinear interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = ["heatmap", "bmp", "interpolation", "bilinear", "nearest-neighbor", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heatmapper = "heatmapper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["heatmapper"]

[tool.pytest.ini_options]
addopts = "-ra"
