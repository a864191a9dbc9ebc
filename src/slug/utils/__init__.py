"""Utility modules for slug."""

from slug.utils.config import MapFileManager
from slug.utils.surrogates import encode_base64, repair_char, repair_surrogates

__all__ = [
    "MapFileManager",
    "encode_base64",
    "repair_char",
    "repair_surrogates",
]
