[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "powerkit"
version = "0.1.0"
description = "Power management building blocks: device descriptions, backlight brightness stepping, bus name tracking and panel button state."
requires-python = ">=3.10"
dependencies = []
keywords = ["power", "battery", "brightness", "backlight", "panel"]
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
    "Topic :: System :: Power (UPS)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["powerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
