[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankarena"
version = "0.1.0"
description = "Turn-based tank battle simulator on a wrapping grid with scripted tank algorithms"
requires-python = ">=3.10"
keywords = ["game", "tanks", "simulation", "turn-based", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tankarena = "tankarena.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tankarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
