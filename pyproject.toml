[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitbuffer"
version = "0.11.1"
description = "Reading bit sequences that are not aligned to byte boundaries"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bits",
    "bitstream",
    "binary",
    "parsing",
    "endianness",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitbuffer"]

[tool.hatch.build.targets.sdist]
include = ["bitbuffer", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
