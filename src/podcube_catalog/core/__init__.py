"""
Core calendar primitives, domain models and contracts.

This module contains the building blocks that are independent of the
catalog engine and of any feed source.
"""
