"""
Core domain models, mathematical primitives, and invariants.

This module contains the building blocks of the triangle engine that are
independent of any particular family: buffers, recurrences, completion
strategies, determinants, validation and contracts.
"""
