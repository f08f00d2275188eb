[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadlab"
version = "0.1.0"
description = "Grid boards with A* path search, an elevator controller and a threaded traffic simulation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "a-star",
    "path-finding",
    "grid",
    "elevator",
    "traffic",
    "simulation",
    "threading",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roadlab-board = "roadlab.board:main"
roadlab-cars = "roadlab.cars:main"
roadlab-astar = "roadlab.astar:main"
roadlab-elevator = "roadlab.elevator_sim:main"
roadlab-traffic = "roadlab.scenario:main"

[tool.hatch.build.targets.wheel]
packages = ["roadlab"]

[tool.pytest.ini_options]
addopts = "-ra"
