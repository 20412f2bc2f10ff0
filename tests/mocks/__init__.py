"""
Mock implementations for testing clangkit components.

This package provides mock implementations of external programs to enable
isolated, deterministic testing.
"""

from .process import FakeRunner, include_block

__all__ = [
    "FakeRunner",
    "include_block",
]
