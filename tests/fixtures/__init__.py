"""Shared fixtures and sample classes (no tests here)."""
