[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ankoconv"
version = "0.1.0"
description = "Loose value conversions to string, bool, float and integer for a scripting-language runtime"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "conversion", "coercion", "truthiness"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ankoconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
