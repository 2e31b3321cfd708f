"""Cluster input validation and request assembly."""
