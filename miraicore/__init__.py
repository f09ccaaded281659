"""Building blocks for a QQ messaging client."""

__version__ = "0.1.0"