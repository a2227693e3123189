"""Data URI and image utility functions"""

import base64
import binascii
import io
import mimetypes
import re
from typing import Tuple, Union
from PIL import Image, UnidentifiedImageError

DEFAULT_MIME_TYPE = "application/octet-stream"

_DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)


def to_data_uri(data: bytes, mime_type: str) -> str:
    """
    Encode raw bytes as a data URI

    Args:
        data: Raw media bytes
        mime_type: Content type embedded in the URI

    Returns:
        String of the form data:<mime-type>;base64,<payload>
    """
    payload = base64.b64encode(data).decode()
    return f"data:{mime_type};base64,{payload}"


def is_data_uri(value) -> bool:
    """Check whether a value looks like a base64 data URI"""
    return isinstance(value, str) and _DATA_URI_PATTERN.match(value) is not None


def parse_data_uri(uri: str) -> Tuple[str, bytes]:
    """
    Split a data URI into its content type and decoded bytes

    Args:
        uri: Data URI string

    Returns:
        Tuple of (mime_type, data)

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    match = _DATA_URI_PATTERN.match(uri) if isinstance(uri, str) else None
    if match is None:
        raise ValueError("Expected a data URI of the form data:<mime-type>;base64,<payload>")

    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload in data URI: {e}") from e

    return match.group("mime"), data


def sniff_mime_type(source: Union[str, bytes]) -> str:
    """
    Guess the content type of a file path or raw bytes

    The file extension wins when it is known; otherwise Pillow is asked to
    identify the image format.
    """
    if isinstance(source, str):
        guessed, _ = mimetypes.guess_type(source)
        if guessed:
            return guessed
        with open(source, "rb") as f:
            source = f.read()

    try:
        with Image.open(io.BytesIO(source)) as img:
            mime_type = Image.MIME.get(img.format)
    except (UnidentifiedImageError, OSError):
        mime_type = None

    return mime_type or DEFAULT_MIME_TYPE


def file_to_data_uri(filepath: str) -> str:
    """
    Read a file once and encode it as a data URI

    Args:
        filepath: Path to the uploaded file

    Returns:
        Data URI carrying the file's bytes and content type
    """
    with open(filepath, "rb") as f:
        data = f.read()

    mime_type, _ = mimetypes.guess_type(filepath)
    if not mime_type:
        mime_type = sniff_mime_type(data)
    return to_data_uri(data, mime_type)

