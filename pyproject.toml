[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shotter"
version = "0.1.0"
description = "A vertical space shooter with a local high-score table"
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame", "space"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shotter = "shotter.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shotter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
