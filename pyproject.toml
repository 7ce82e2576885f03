[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bakerysplit"
version = "0.1.0"
description = "Split a UI Bakery application export into one folder per top-level page"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui-bakery", "export", "json", "split", "pages"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bakerysplit = "bakerysplit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bakerysplit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
