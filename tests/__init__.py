"""
Test suite for the spatial box algebra

Contains:
- tests/unit/          : Unit tests for intervals, boxes and partition reducer
"""
