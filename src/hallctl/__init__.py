"""hallctl — validated input parsing for hall residence records."""

__version__ = "0.1.0"
