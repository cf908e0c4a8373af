[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zlang"
version = "0.1.0"
description = "Lexer and parser for a small statically typed toy language, printing tokens and parse trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "tokenizer", "toy language", "parse tree"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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

[project.scripts]
zlang = "zlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
