[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromakit"
version = "1.5.1"
description = "Building blocks for chroma-based audio fingerprinting: filters, quantizers, classifiers, presets and stream helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "fingerprint", "chroma", "signal-processing", "acoustic"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chromakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
