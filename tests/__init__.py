"""
Test suite for densematrix

Contains:
- tests/unit/          : Unit tests for individual modules
"""
