"""
Core builder machinery and domain value objects.

This module contains the staged builder variants and the immutable
value objects they produce. It has no external systems behind it.
"""
