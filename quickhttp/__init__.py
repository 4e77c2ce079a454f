"""HTTP method names, status codes and their standard reason phrases."""

__version__ = "0.1.0"
__all__ = ["status"]