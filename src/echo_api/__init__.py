"""Echo API: a minimal HTTP echo demonstration service."""

__version__ = "0.1.0"
