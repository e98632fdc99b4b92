"""colortty.core — Foundation layer.

Contains the colour model, colour string parsing, errors, and output writers.
This module has NO dependencies on colortty.formats or colortty.registry.
Only stdlib and numpy are allowed here.
"""
