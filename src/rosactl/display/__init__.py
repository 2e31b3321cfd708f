"""Display utilities for rosactl."""
