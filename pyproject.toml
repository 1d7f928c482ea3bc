[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treeshell"
version = "0.1.0"
description = "Parse shell command lines into an operator tree and resolve command paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "syntax tree", "pipeline", "redirection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treeshell = "treeshell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treeshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
