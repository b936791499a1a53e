[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintboard"
version = "0.1.0"
description = "A small vector drawing board: rectangles, ellipses, triangles, lines and text, saved as JSON .draw files"
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "vector", "shapes", "canvas", "paint", "tkinter"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
paintboard = "paintboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["paintboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
