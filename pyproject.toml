[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sims"
version = "0.1.0"
description = "Interactive student information management system backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "records", "sqlite", "console", "management"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sims = "sims.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["sims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
