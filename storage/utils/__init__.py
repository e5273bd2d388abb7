"""
Utils Package
"""

from storage.utils.path_utils import (
    ensure_directory,
    get_file_extension,
    guess_mime_type,
    local_path_from_ref,
    safe_filename,
)

__all__ = [
    "ensure_directory",
    "get_file_extension",
    "guess_mime_type",
    "local_path_from_ref",
    "safe_filename",
]
