"""
Core domain models, error taxonomy, and overflow-checked arithmetic.

This module contains the foundational building blocks: integer type
descriptions, the emulated fixed-width machine, and the checked operations
built on top of it.
"""
