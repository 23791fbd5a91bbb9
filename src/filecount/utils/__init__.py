"""
filecount.utils – Small shared utilities (extension handling, size formatting).
"""
from .bytesize import format_size
from .suffixes import extension_of, is_extension_allowed, normalize_extensions

__all__ = ["extension_of", "format_size", "is_extension_allowed", "normalize_extensions"]
