"""Symbols, locations, errors, syntax tree, pretty-printer and integer evaluator for Tiger."""

__version__ = "0.1.0"