"""
Test suite for staged-builder

Contains:
- tests/unit/          : Unit tests for builders and domain models
"""
