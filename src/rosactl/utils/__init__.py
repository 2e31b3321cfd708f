"""Utility helpers for rosactl."""
