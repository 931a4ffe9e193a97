"""Graph primitives and helpers.

This package provides the weighted directed graph type `WeightedDiGraph` and
helper modules for conversion (`convert`) and serialization (`io`).
"""
