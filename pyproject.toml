[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamegfx"
version = "0.1.0"
description = "2D game graphics helpers: rectangles, screen scaling, texture atlas packing and bitmap-font text layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamedev", "2d", "graphics", "scaling", "bmfont", "text-layout", "texture-atlas"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gamegfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
