[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ntlib"
version = "0.1.0"
description = "Small helpers for integer-to-text conversion, file-descriptor I/O, a character buffer and a minimal printf"
requires-python = ">=3.10"
keywords = ["printf", "itoa", "hex", "file descriptor", "character buffer"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ntlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
