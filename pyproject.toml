[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ardrivo"
version = "0.1.0"
description = "Arduino-style runtime primitives for simulated boards: core helpers, strings and device storage layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["arduino", "emulator", "simulation", "sketch", "string"]
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
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ardrivo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
