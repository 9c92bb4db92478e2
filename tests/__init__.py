"""
Test suite for numwords

Contains:
- tests/unit/          : Unit tests for value types, languages and the converter
"""
