[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reedpaint"
version = "0.1.0"
description = "Prompt rendering, line-wrap estimation and terminal painting for interactive line editors"
requires-python = ">=3.10"
keywords = ["terminal", "prompt", "line-editor", "ansi", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = [
    "regex",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["reedpaint"]

[tool.pytest.ini_options]
addopts = "-ra"
