[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toyrender"
version = "0.1.0"
description = "Renderer building blocks: procedural meshes, OBJ/MTL loading, an orbit camera and small helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "rendering", "mesh", "obj", "mtl", "camera", "geometry"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["toyrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
