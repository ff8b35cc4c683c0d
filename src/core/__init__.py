"""
Core domain models, mathematical primitives, and invariants.

TMN (Too Many Numbers): arithmetic over real numbers, complex numbers and
quaternions through a single unifying value, plus rotation built on it.
This module contains the foundational building blocks; all values are
immutable and every operation returns a new value.
"""
