"""
Test suite for FracLib

Contains:
- tests/unit/          : Unit tests for individual modules
"""
