[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchpad"
version = "0.1.0"
description = "A minimal windowed scratchpad text editor"
requires-python = ">=3.10"
keywords = ["editor", "text", "scratchpad", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scratchpad = "scratchpad.main:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
