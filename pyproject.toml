[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ggg"
version = "0.1.0"
description = "Manifest handling and helpers for declaring Godot project dependencies"
requires-python = ">=3.11"
keywords = ["godot", "addons", "dependencies", "manifest", "toml", "gamedev"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "tomlkit",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ggg = "ggg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ggg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
