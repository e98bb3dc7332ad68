[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsapractice"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: arrays, strings, linked lists, sorting, searching and text patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "linked-list",
    "sorting",
    "binary-search",
    "two-pointers",
    "practice",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsa-binary-search = "dsapractice.search:main"
dsa-grid = "dsapractice.grid:main"
dsa-patterns = "dsapractice.patterns:main"
dsa-sort = "dsapractice.sorting:main"
dsa-calc = "dsapractice.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["dsapractice"]

[tool.hatch.build.targets.sdist]
include = ["dsapractice", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
