[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devgeini"
version = "1.0.1"
description = "Scaffold frontend development projects with structure and boilerplate"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["scaffolding", "boilerplate", "project-generator", "cli", "templates", "frontend"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
devgeini = "devgeini.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["devgeini"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
