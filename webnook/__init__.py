"""An HTML builder with string, encoding, Unicode, file and network helpers."""

__version__ = "0.1.0"