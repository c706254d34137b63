"""A vertical space shooter with a local high-score table, built on pygame."""

__version__ = "0.1.0"