[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exquisite_verse"
version = "0.1.0"
description = "Collaborative line-by-line poems with base64 obfuscation of earlier lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["poetry", "exquisite corpse", "game", "base64"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exquisite-verse = "exquisite_verse.app:main"

[tool.hatch.build.targets.wheel]
packages = ["exquisite_verse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
