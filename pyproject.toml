[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microsense"
version = "0.1.0"
description = "Post-processing for small speech and gesture recognition models: command smoothing, quantisation helpers, frame conversion and a gesture lock."
requires-python = ">=3.10"
dependencies = []
keywords = ["speech-commands", "gesture-recognition", "quantization", "tinyml", "relu6"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["microsense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
