[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdrmerge"
version = "0.1.0"
description = "Building blocks for merging raw exposures into a floating-point HDR DNG"
requires-python = ">=3.10"
keywords = ["hdr", "raw", "dng", "exposure", "bitmap", "alignment", "photography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hdrmerge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
