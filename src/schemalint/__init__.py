"""schemalint: lint database schemas against pluggable rules."""

__version__ = "0.1.0"
