[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rrsched"
version = "0.1.0"
description = "Round-robin CPU scheduling simulator with an execution-sequence report"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "round-robin", "cpu", "simulation", "operating-systems"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rrsched = "rrsched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rrsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
