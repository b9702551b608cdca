[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchpad"
version = "0.1.0"
description = "A small raster paint program with pencil, brush, eraser, bucket and colour picker tools"
requires-python = ">=3.10"
keywords = ["paint", "drawing", "raster", "pygame", "editor", "printf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchpad = "sketchpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchpad"]

[tool.pytest.ini_options]
addopts = "-ra"
