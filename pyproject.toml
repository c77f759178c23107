[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practica"
version = "0.1.0"
description = "Small worked exercises: containers, text queries, sorting, trees, a sudoku solver, toy TCP servers and LTE signal helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "algorithms",
    "sudoku",
    "dancing-links",
    "text-query",
    "lte",
    "gold-sequence",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
practica-wordcount = "practica.wordcount:main"
practica-textquery = "practica.textquery:main"
practica-bitree = "practica.bitree:main"
practica-sudoku-server = "practica.sudoku_server:main"
practica-echo = "practica.echo:main"
practica-chargen = "practica.chargen:main"
practica-keygen = "practica.keygen:main"
practica-pollpipes = "practica.pollpipes:main"
practica-connection = "practica.connection:main"

[tool.hatch.build.targets.wheel]
packages = ["practica"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
