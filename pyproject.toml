[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tymesolar"
version = "1.3.8"
description = "Solar (Julian/Gregorian) calendar units: years, half years, seasons, months, weeks, days and times."
requires-python = ">=3.10"
dependencies = []
keywords = ["calendar", "solar", "gregorian", "julian", "date", "week"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tymesolar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
