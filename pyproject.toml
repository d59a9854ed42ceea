[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubscene"
version = "0.1.0"
description = "Reader and validator for the texture and colour header of .cub scene files"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "scene", "parser", "textures", "colors"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubscene = "cubscene.parser:main"

[tool.hatch.build.targets.wheel]
packages = ["cubscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
