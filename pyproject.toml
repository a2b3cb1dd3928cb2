[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicequiv"
version = "0.1.0"
description = "Compare two propositional logic expressions by building their truth tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "propositional", "truth table", "equivalence", "boolean"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicequiv = "logicequiv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logicequiv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
