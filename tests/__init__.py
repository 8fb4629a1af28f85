"""
Test suite for podcube-catalog

Contains:
- tests/unit/          : Unit tests for individual modules
"""
