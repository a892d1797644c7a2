"""
Test suite for the sexagesimal formatter

Contains:
- tests/unit/ : Unit tests for individual modules
"""
