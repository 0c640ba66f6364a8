"""Geometry toolkit: STL meshes, triangle intersection, Bezier curves, polygon booleans and sketching."""

__version__ = "0.1.0"