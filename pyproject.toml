[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prodcost"
version = "0.1.0"
description = "Track raw materials and products, and work out production cost and sale price from a terminal menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["costing", "pricing", "bill of materials", "inventory", "csv"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prodcost = "prodcost.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prodcost"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
