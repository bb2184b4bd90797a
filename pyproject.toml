[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubeworld"
version = "0.1.0"
description = "Scene model for a small 3D world: vector maths, camera, matrix stacks, lights, materials, mesh normals and input commands, plus compact utilities."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "scene", "camera", "matrix", "normals", "lighting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cubeworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
