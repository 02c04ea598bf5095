"""Test helpers for building audit results."""
