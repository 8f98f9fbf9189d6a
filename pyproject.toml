[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terminalco"
version = "0.1.0"
description = "A text-terminal company game: visit moons, buy gear, scan for creatures."
requires-python = ">=3.10"
keywords = ["game", "terminal", "text-based", "simulation", "mongodb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
terminalco = "terminalco.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["terminalco"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
