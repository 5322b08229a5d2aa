"""Perlinicon - procedural Perlin noise favicon generator."""

__version__ = "0.1.0"
