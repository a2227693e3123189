"""File handling utilities"""

import logging
import mimetypes
import os
import tempfile
from datetime import datetime
from typing import List, Optional

from ..config import get_settings
from .image_utils import parse_data_uri

logger = logging.getLogger(__name__)

# mimetypes has no entry for some of the formats the models return
_EXTENSION_OVERRIDES = {
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
    "video/mp4": ".mp4",
    "video/webm": ".webm",
}


def extension_for(mime_type: str) -> str:
    """Pick a file extension for a content type"""
    return _EXTENSION_OVERRIDES.get(mime_type) or mimetypes.guess_extension(mime_type) or ".bin"


def save_media(uri: str, directory: Optional[str] = None, prefix: str = "generated") -> str:
    """
    Write a media data URI to a temporary file

    Gradio displays and offers downloads of files on disk, so generated
    videos (and images, when downloaded) are materialised here.

    Args:
        uri: Image or video data URI
        directory: Target directory, defaults to settings.temp_dir
        prefix: Filename prefix

    Returns:
        Path to the saved file
    """
    mime_type, data = parse_data_uri(uri)

    if directory is None:
        directory = get_settings().temp_dir
    os.makedirs(directory, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    temp_file = tempfile.NamedTemporaryFile(
        prefix=f"{prefix}_{timestamp}_",
        suffix=extension_for(mime_type),
        delete=False,
        dir=directory,
    )
    with temp_file:
        temp_file.write(data)

    logger.debug(f"Saved {len(data)} bytes of {mime_type} to {temp_file.name}")
    return temp_file.name


def cleanup_temp_files(file_paths: List[str]):
    """
    Clean up temporary files

    Args:
        file_paths: List of file paths to delete
    """
    for file_path in file_paths:
        try:
            os.unlink(file_path)
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning(f"Could not remove temporary file {file_path}: {e}")
