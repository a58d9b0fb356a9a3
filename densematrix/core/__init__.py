"""
Core domain models, mathematical primitives, and invariants.

This module contains the Matrix value type, the error taxonomy, the scalar
and rotation helpers it is built on, and the serialization contracts.
"""
