"""
Test suite for TMN

Contains:
- tests/unit/          : Unit tests for individual modules
"""
