[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jungle_engine"
version = "0.1.0"
description = "Core runtime pieces of a small game engine: 3D math, frustum culling, containers, interned names and allocation bookkeeping."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "3d-math", "matrix", "quaternion", "frustum", "containers", "names"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jungle_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
