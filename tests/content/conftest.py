"""
Content Test Configuration and Fixtures

To run:
    pytest tests/content/
"""

import pytest


@pytest.fixture
def sample_picture(tmp_path):
    """
    Create a small picture file on disk.

    Usage:
        def test_resolve(sample_picture):
            info = resolver.resolve(str(sample_picture), MediaKind.PICTURE)
    """
    picture = tmp_path / "IMG_0001.jpg"
    picture.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return picture


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full integration tests")
