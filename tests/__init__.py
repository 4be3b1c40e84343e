"""
Test suite for bignumber

Contains:
- tests/unit/          : Unit tests for individual modules
"""
