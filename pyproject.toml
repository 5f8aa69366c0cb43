[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "program_structure"
version = "0.1.0"
description = "Syntax tree, diagnostics and program archive structures for a circuit description language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ast", "diagnostics", "circuits", "zero-knowledge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["program_structure"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
