"""Models for GMP tasks and events, task parsing, and an async HTTP client."""

__version__ = "0.1.0"
__all__ = ["gmp_types", "utils", "client"]