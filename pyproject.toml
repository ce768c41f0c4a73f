[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roguekit"
version = "0.1.0"
description = "Colour handling, code page 437 glyph conversion and an embedded resource registry for roguelike games"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "cp437", "codepage437", "color", "rgb", "hsv", "palette", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roguekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
