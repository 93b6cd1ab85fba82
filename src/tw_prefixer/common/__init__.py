"""Shared utilities used across the prefixer (logging, YAML)."""
