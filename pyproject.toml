[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snckit"
version = "0.1.0"
description = "96-bit integer arithmetic, integer formatting, 8-bit posit ratios and Timer1 period maths for a slash-number calculator"
requires-python = ">=3.10"
dependencies = []
keywords = ["int96", "fixed-point", "itoa", "posit", "avr", "timer", "prescaler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["snckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
