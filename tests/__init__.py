"""
Test suite for numtri

Contains:
- tests/unit/          : Unit tests for individual modules
"""
