"""Network policy value types and in-memory informer and lister helpers."""

__version__ = "0.1.0"

__all__ = ["asnumber", "factory", "lister", "port", "protocol", "resources", "uint8orstring"]