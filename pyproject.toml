[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "officerev"
version = "1.0.0"
description = "HTTP service that computes monthly revenue and unreserved capacity from office reservation data."
requires-python = ">=3.10"
keywords = ["office", "reservations", "revenue", "capacity", "flask", "http"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Office/Business",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
officerev = "officerev.app:main"

[tool.hatch.build.targets.wheel]
packages = ["officerev"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
