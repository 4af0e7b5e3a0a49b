[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsms"
version = "0.1.0"
description = "Tech Support Management System: a console queue for support tickets ordered by priority and arrival."
requires-python = ">=3.10"
dependencies = []
keywords = ["support", "tickets", "queue", "priority", "console"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tsms = "tsms.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tsms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
