"""Character, string, byte-buffer, linked-list and line-reading helpers."""

__version__ = "0.1.0"