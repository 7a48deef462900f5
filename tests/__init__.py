"""
Test suite for kansuji

Contains:
- tests/unit/          : Unit tests for individual modules
"""
