[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dklang"
version = "0.1.0"
description = "Bytecode virtual machine, x86-64 assembly generator, symbol table and token definitions for the dk language"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual-machine", "bytecode", "interpreter", "assembly", "compiler", "tokens"]
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
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dklang"]

[tool.pytest.ini_options]
addopts = "-ra"
