[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cyatools"
version = "0.1.0"
description = "Small teaching tools for computability and algorithms: words and languages, a Turing machine simulator, grade books and Euclidean minimum spanning trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "computability",
    "algorithms",
    "formal languages",
    "turing machine",
    "spanning tree",
    "kruskal",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
cyatools-strings = "cyatools.strings_cli:main"
cyatools-grades = "cyatools.grades_cli:main_single"
cyatools-grades-multi = "cyatools.grades_cli:main_multiple"
cyatools-turing = "cyatools.turing_cli:main"
cyatools-emst = "cyatools.emst:main"

[tool.hatch.build.targets.wheel]
packages = ["cyatools"]

[tool.pytest.ini_options]
addopts = "-ra"
