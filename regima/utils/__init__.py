"""Shared helpers for environment parsing, URLs and logging."""
