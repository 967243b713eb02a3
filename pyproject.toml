[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vibeflow"
version = "0.1.0"
description = "Ternary-logic transducers, comonadic vibe contexts and bounded streams for world-moment processing"
requires-python = ">=3.10"
dependencies = []
keywords = ["ternary logic", "transducers", "comonad", "streaming", "ring buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vibeflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
