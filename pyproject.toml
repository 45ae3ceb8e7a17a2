[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swordgen"
version = "0.2.7"
description = "Simple wordlist generator: every concatenation of a set of words up to a given depth"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordlist", "password", "generator", "cartesian-product", "security"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swg = "swordgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["swordgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
