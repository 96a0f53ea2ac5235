[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookdesk"
version = "0.1.0"
description = "A small console manager for book and customer records kept in fixed-size binary files"
requires-python = ">=3.10"
dependencies = []
keywords = ["books", "customers", "library", "records", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookdesk = "bookdesk.console:main"

[tool.hatch.build.targets.wheel]
packages = ["bookdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
