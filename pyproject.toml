[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubeworks"
version = "0.1.0"
description = "Vectors, 4x4 matrices, planes, collision primitives, a stopwatch and a reliable UDP socket layer for small 3D engines"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "vectors", "matrix", "collision", "simplex", "udp", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubeworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
