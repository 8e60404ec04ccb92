[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corekit"
version = "0.1.0"
description = "Small game-engine core: vector and matrix maths, collision helpers, rectangle packing, file and thread utilities, and a binary tile-map loader."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "vector", "matrix", "collision", "rectangle packing", "tilemap", "tiled"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["corekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
