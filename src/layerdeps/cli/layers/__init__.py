"""Layer inspection commands."""
