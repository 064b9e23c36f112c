[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sash"
version = "0.1.0"
description = "A small interactive shell with sequencing, logic operators, pipelines, subshells and redirections"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "lexer", "parser", "interpreter"]
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
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sash = "sash.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["sash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
