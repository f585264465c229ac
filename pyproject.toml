[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forradia"
version = "0.1.0"
description = "A small tile-based role-playing world: procedural generation, scenes and a pygame front end."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "rpg", "tiles", "procedural-generation", "pygame"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
forradia = "forradia.app:main"

[tool.hatch.build.targets.wheel]
packages = ["forradia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
