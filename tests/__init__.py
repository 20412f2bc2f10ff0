"""Test suite for clangkit."""
