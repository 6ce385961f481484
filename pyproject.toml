[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expc"
version = "0.2.0"
description = "Building blocks of a small compiler: SSA intermediate representation, interned types, translation-unit context and assembler directives"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ssa", "intermediate-representation", "type-system", "assembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["expc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
