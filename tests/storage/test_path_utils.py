"""
Path Utilities Tests

Tests cover:
1. MIME type guessing is total
2. Media references to local paths
3. Filename sanitising and directory creation

To run these tests:
    pytest tests/storage/test_path_utils.py -v
"""

from pathlib import Path

import pytest

from config.settings import DEFAULT_MIME_TYPE
from storage.utils.path_utils import (
    ensure_directory,
    get_file_extension,
    guess_mime_type,
    local_path_from_ref,
    safe_filename,
)

# =============================================================================
# MIME TYPE TESTS
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected",
    [
        ("IMG_0001.jpg", "image/jpeg"),
        ("IMG_0001.JPG", "image/jpeg"),
        ("/sdcard/DCIM/VID_0001.mp4", "video/mp4"),
        ("shot.png", "image/png"),
    ],
)
def test_guess_known_mime_type(name, expected):
    assert guess_mime_type(name) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "name",
    ["README", "archive.unknownext42", "", "trailing.", Path("no_extension")],
)
def test_guess_mime_type_falls_back(name):
    """Unknown or missing extensions give the generic binary type"""
    assert guess_mime_type(name) == DEFAULT_MIME_TYPE


@pytest.mark.unit
def test_get_file_extension():
    assert get_file_extension("a/b/IMG.JPEG") == "jpeg"
    assert get_file_extension("README") == ""


# =============================================================================
# MEDIA REFERENCE TESTS
# =============================================================================


@pytest.mark.unit
def test_local_path_from_plain_path():
    assert local_path_from_ref("/sdcard/DCIM/IMG_1.jpg") == Path("/sdcard/DCIM/IMG_1.jpg")


@pytest.mark.unit
def test_local_path_from_file_uri():
    path = local_path_from_ref("file:///sdcard/DCIM/My%20Photo.jpg")

    assert path == Path("/sdcard/DCIM/My Photo.jpg")


@pytest.mark.unit
def test_local_path_from_path_object():
    assert local_path_from_ref(Path("relative/IMG.jpg")) == Path("relative/IMG.jpg")


@pytest.mark.unit
@pytest.mark.parametrize(
    "media_ref",
    ["content://media/external/images/7", "https://example.com/a.jpg", "", None],
)
def test_non_local_reference(media_ref):
    assert local_path_from_ref(media_ref) is None


# =============================================================================
# FILENAME AND DIRECTORY TESTS
# =============================================================================


@pytest.mark.unit
def test_safe_filename():
    assert safe_filename("IMG:with*bad?chars.jpg") == "IMG_with_bad_chars.jpg"
    assert safe_filename("a/b\\c.jpg") == "a_b_c.jpg"


@pytest.mark.unit
def test_ensure_directory_creates(tmp_path):
    target = tmp_path / "a" / "b"

    assert ensure_directory(target) is True
    assert target.is_dir()


@pytest.mark.unit
def test_ensure_directory_without_create(tmp_path):
    assert ensure_directory(tmp_path / "missing", create=False) is False


@pytest.mark.unit
def test_ensure_directory_on_file(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    assert ensure_directory(blocker) is False
