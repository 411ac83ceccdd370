[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvbridge"
version = "0.1.0"
description = "RV-C CAN bus message handling: DGN decoding, frame building, dispatch and a paced send queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["rv-c", "can-bus", "rv", "dgn", "home-automation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rvbridge"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
