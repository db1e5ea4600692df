[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hulk"
version = "0.1.0"
description = "A table-driven lexer and syntax-tree toolkit for the HULK language"
requires-python = ">=3.10"
dependencies = []
keywords = ["hulk", "lexer", "scanner", "dfa", "compiler", "ast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hulk-lex = "hulk.scanner:main"

[tool.hatch.build.targets.wheel]
packages = ["hulk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
