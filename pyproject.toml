[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particles"
version = "0.1.0"
description = "A small particle-burst animation built on 2D matrix transforms"
requires-python = ">=3.10"
keywords = ["particles", "animation", "matrix", "pygame", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
particles = "particles.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["particles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
