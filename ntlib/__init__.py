"""Integer-to-text conversion, file-descriptor I/O, a character buffer and printf."""

__version__ = "0.1.0"
__all__ = ["char_buffer", "conversion", "fd", "printf"]