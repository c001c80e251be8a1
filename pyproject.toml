[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todocli"
version = "0.1.0"
description = "Interactive terminal task manager that keeps its tasks in a JSON file"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "cli", "json", "productivity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todocli = "todocli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["todocli"]

[tool.pytest.ini_options]
addopts = "-ra"
