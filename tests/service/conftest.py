"""
Service Test Configuration and Fixtures

To run:
    pytest tests/service/
"""

import pytest
import yaml


@pytest.fixture
def service_config(tmp_path):
    """
    Write a YAML config with pictures enabled on Wi-Fi only.

    Returns a helper that rewrites the file with overrides.

    Usage:
        def test_x(service_config):
            path = service_config(video_upload_enabled=True)
    """
    path = tmp_path / "instant_upload.yaml"

    def _write(**overrides):
        data = {
            "picture_upload_enabled": True,
            "picture_wifi_only": True,
            "accounts": ["alice", "bob"],
            "current_account": "alice",
            "pending_db_path": str(tmp_path / "pending.db"),
            "local_move_dir": str(tmp_path / "uploaded"),
        }
        data.update(overrides)
        path.write_text(yaml.dump(data))
        return path

    return _write


@pytest.fixture
def mirror(tmp_path):
    """Mirror folder used as the upload transport"""
    return tmp_path / "mirror"


@pytest.fixture
def no_transport(monkeypatch):
    """Run with UPLOAD_MIRROR_DIR unset, whatever the environment says"""
    monkeypatch.setattr("instant_upload_service.UPLOAD_MIRROR_DIR", None)


@pytest.fixture
def picture(tmp_path):
    path = tmp_path / "IMG_0100.jpg"
    path.write_bytes(b"fake jpeg data")
    return path


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full integration tests")
