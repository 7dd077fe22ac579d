[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailysolve"
version = "0.1.0"
description = "Solutions to a set of short competitive-programming exercises, as a library and a command."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "exercises", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dailysolve = "dailysolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dailysolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
