"""Version information for fizzbuzz-cps."""

__version__ = "0.1.0"
