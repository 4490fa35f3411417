"""Helpers operating on syntax nodes: value resolution and expression paths."""
