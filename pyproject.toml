[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediautil"
version = "0.1.0"
description = "Small multimedia helpers: byte swapping, integer packing, clipping, colour-space maths, error codes, channel masks and pixel format descriptors"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "multimedia",
    "audio",
    "video",
    "byteswap",
    "colorspace",
    "channel-layout",
    "pixel-format",
]
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
    "Topic :: Multimedia",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["mediautil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
