"""Utility functions and helpers"""

from .image_utils import to_data_uri, parse_data_uri, is_data_uri, sniff_mime_type, file_to_data_uri
from .file_utils import save_media, cleanup_temp_files

__all__ = [
    "to_data_uri",
    "parse_data_uri",
    "is_data_uri",
    "sniff_mime_type",
    "file_to_data_uri",
    "save_media",
    "cleanup_temp_files",
]
