"""paramcheck — parameter validation engine for service request handlers."""

__version__ = "1.0.0"
