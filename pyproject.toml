[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventcal"
version = "0.1.0"
description = "A small event calendar with dates, times, event filtering and a text screen buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["calendar", "events", "scheduling", "dates", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
eventcal = "eventcal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eventcal"]

[tool.pytest.ini_options]
addopts = "-ra"
