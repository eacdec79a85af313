"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the BPR calculator:
reference tables, numerical primitives, contracts and error types.
"""
