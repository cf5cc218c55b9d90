"""Components for producing and consuming FIX protocol data."""

__version__ = "0.1.0"