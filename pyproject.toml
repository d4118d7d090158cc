[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbtransfer"
version = "0.1.0"
description = "Game Boy transfer toolkit: Game Boy CPU assembler, flash save model, custom save data, selection menus and scripted dialogue"
requires-python = ">=3.10"
dependencies = []
keywords = ["game boy", "game boy advance", "z80", "assembler", "flash save", "dialogue", "script"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbtransfer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
