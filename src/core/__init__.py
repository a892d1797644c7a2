"""
Core domain models, symbol tables and numerical primitives.

This module contains the building blocks the formatter is assembled from:
value types, format directives, symbol tables and significant-digit math.
"""
