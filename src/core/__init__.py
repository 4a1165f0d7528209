"""
Core domain models and algebra primitives.

This module contains the foundational building blocks: intervals, spatial
boxes and the pure algebra over them. Nothing here mutates its inputs.
"""
