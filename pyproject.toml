[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tonestack"
version = "0.1.0"
description = "Three-band guitar-amp style tone stack built from biquad shelving and peaking filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "equalizer", "biquad", "tone stack", "filter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tonestack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
