"""
Test suite for cnpjkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
