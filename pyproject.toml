[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plutoengine"
version = "0.1.0"
description = "Small linear algebra toolkit for 3D graphics: vectors, matrices, transforms, projections, a fly camera and mesh primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "vector", "matrix", "graphics", "camera", "transform", "projection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plutoengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
