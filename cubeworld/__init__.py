"""Scene model for small 3D worlds: vector maths, camera, matrix stacks, lights, materials, mesh normals, input commands and utilities."""

__version__ = "0.1.0"