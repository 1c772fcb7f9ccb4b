[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinemadesk"
version = "0.1.0"
description = "Plain-text record keeping for a small cinema: monthly expenses, customer reviews and on-site services."
requires-python = ">=3.10"
dependencies = []
keywords = ["cinema", "records", "expenses", "reviews", "services", "text files"]
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
cinemadesk-expenses = "cinemadesk.expenses:main"
cinemadesk-reviews = "cinemadesk.reviews:main"
cinemadesk-services = "cinemadesk.services:main"

[tool.hatch.build.targets.wheel]
packages = ["cinemadesk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
