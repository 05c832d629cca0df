"""Shared utilities for CSS Stylecheck."""
