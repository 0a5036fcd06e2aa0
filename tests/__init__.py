"""
Test suite for safeint

Contains:
- tests/reference.py   : Infinite-precision reference arithmetic
- tests/unit/          : Unit tests for individual modules (exhaustive 8-bit checks)
- tests/property/      : Hypothesis property tests for 16/32/64-bit types
"""
