"""Top-level layerdeps commands."""
