"""Code point aware UTF-8 helpers, the UStr string type and UStr list operations."""

__version__ = "0.1.0"
__all__ = ["utf8", "ustr", "ulist"]