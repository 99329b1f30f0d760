"""
layerdeps - layer dependency reconciliation

Collects the dependencies declared by composed configuration layers, compares
them against the host project's manifest, and installs what is missing or
outdated in a single package-manager call.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
