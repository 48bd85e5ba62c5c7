[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonvalue"
version = "2.12.0"
description = "Mutable JSON value model with UTF-8 checks, ordered objects and real-number formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "utf-8", "value", "document model"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonvalue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
