"""
Path Utilities

Helper functions for local paths, media references and directory operations.
"""

import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote, urlparse

from config.settings import DEFAULT_MIME_TYPE

logger = logging.getLogger(__name__)


def ensure_directory(path: Path, create: bool = True) -> bool:
    """
    Ensure directory exists.

    Args:
        path: Directory path
        create: If True, create if doesn't exist

    Returns:
        True if directory exists or was created

    Example:
        ensure_directory(Path("/home/pi/instant_upload"))
    """
    try:
        if path.exists():
            if not path.is_dir():
                logger.error(f"Path exists but is not a directory: {path}")
                return False
            return True

        if create:
            path.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Created directory: {path}")
            return True

        return False

    except OSError as e:
        logger.error(f"Failed to create directory {path}: {e}")
        return False


def safe_filename(filename: str) -> str:
    """
    Make filename safe by removing invalid characters.

    Args:
        filename: Original filename

    Returns:
        Safe filename

    Example:
        safe = safe_filename("IMG:with*bad?chars.jpg")
        # Returns: "IMG_with_bad_chars.jpg"
    """
    invalid_chars = ['<', '>', ':', '"', '/', '\\', '|', '?', '*']
    safe = filename

    for char in invalid_chars:
        safe = safe.replace(char, '_')

    return safe


def get_file_extension(path: Union[str, Path]) -> str:
    """
    Get file extension (lowercase, without dot).

    Args:
        path: File path

    Returns:
        Extension string, "" when the name has none

    Example:
        ext = get_file_extension(Path("IMG_0001.JPG"))
        # Returns: "jpg"
    """
    return Path(path).suffix.lower().lstrip('.')


def guess_mime_type(path: Union[str, Path]) -> str:
    """
    Guess a file's MIME type from its extension.

    Total function: unknown extensions, names without an extension and
    unparseable names all give DEFAULT_MIME_TYPE.

    Args:
        path: File path or name

    Returns:
        MIME type string

    Example:
        guess_mime_type("IMG_0001.jpg")  # "image/jpeg"
        guess_mime_type("README")        # "application/octet-stream"
    """
    try:
        extension = get_file_extension(path)
        if not extension:
            return DEFAULT_MIME_TYPE

        mime_type, _ = mimetypes.guess_type(f"file.{extension}", strict=False)
    except (TypeError, ValueError) as e:
        logger.error(f"Cannot find MIME type of {path!r}: {e}")
        return DEFAULT_MIME_TYPE

    return mime_type or DEFAULT_MIME_TYPE


def local_path_from_ref(media_ref: Union[str, Path]) -> Optional[Path]:
    """
    Turn a media reference into a local path.

    Accepts a plain path or a "file://" URI. Other URI schemes are
    not local and give None.

    Args:
        media_ref: Path or URI

    Returns:
        Path, or None if the reference is not a local file reference

    Example:
        local_path_from_ref("file:///sdcard/DCIM/IMG_0001.jpg")
        # Returns: Path("/sdcard/DCIM/IMG_0001.jpg")
    """
    if isinstance(media_ref, Path):
        return media_ref

    if not isinstance(media_ref, str) or not media_ref.strip():
        return None

    parsed = urlparse(media_ref)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))

    # Single letters are Windows drive letters, not schemes
    if parsed.scheme and len(parsed.scheme) > 1:
        return None

    return Path(media_ref)
