[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fridagar"
version = "0.1.0"
description = "Icelandic public holidays, special days and business-day arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["iceland", "holidays", "calendar", "business days", "workdays", "ics", "icalendar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Icelandic",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fridagar = "fridagar.cli:main"
fridagar-ics = "fridagar.ics:main"

[tool.hatch.build.targets.wheel]
packages = ["fridagar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
