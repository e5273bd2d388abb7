"""
Scheduling Test Configuration and Fixtures

Builds a scheduler wired to mock collaborators. Tests flip the mocks
(network conditions, failures) and inspect what reached the uploader
and the pending store.

To run:
    pytest tests/scheduling/
"""

import pytest

from accounts import MockAccountRegistry, create_account_resolver
from content import FileSystemContentResolver
from core.network import StaticNetworkState
from scheduling import InstantUploadScheduler, UploadPolicyConfig
from storage import MockPendingStore
from upload import MockUploader, RemoteNamingPolicy, UploadJobBuilder

# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def registry():
    """Two registered accounts, alice active"""
    return MockAccountRegistry(["alice", "bob"], current="alice")


@pytest.fixture
def pending_store():
    store = MockPendingStore()
    store.initialize()
    yield store
    store.cleanup()


@pytest.fixture
def uploader():
    return MockUploader()


@pytest.fixture
def network():
    """Offline until a test says otherwise"""
    return StaticNetworkState()


@pytest.fixture
def job_builder():
    return UploadJobBuilder(RemoteNamingPolicy("/InstantUpload", "/InstantUpload/Videos"))


@pytest.fixture
def make_scheduler(registry, pending_store, uploader, network, job_builder):
    """
    Factory for schedulers sharing the mock collaborators.

    Usage:
        def test_x(make_scheduler, uploader):
            scheduler = make_scheduler(
                UploadPolicyConfig(picture_upload_enabled=True),
                strategy="all",
            )
    """

    def _make(policy=None, strategy="current", allowed=None):
        return InstantUploadScheduler(
            config=policy or UploadPolicyConfig(),
            account_resolver=create_account_resolver(strategy, registry, allowed),
            pending_store=pending_store,
            content_resolver=FileSystemContentResolver(),
            network_state=network,
            uploader=uploader,
            job_builder=job_builder,
        )

    return _make


# =============================================================================
# MEDIA FIXTURES
# =============================================================================


@pytest.fixture
def picture(tmp_path):
    """A captured picture on disk"""
    path = tmp_path / "DCIM" / "IMG_0001.jpg"
    path.parent.mkdir()
    path.write_bytes(b"fake jpeg data")
    return path


@pytest.fixture
def video(tmp_path):
    """A captured video on disk"""
    path = tmp_path / "DCIM" / "VID_0001.mp4"
    path.parent.mkdir(exist_ok=True)
    path.write_bytes(b"fake mp4 data")
    return path


@pytest.fixture
def config_file(tmp_path):
    """Path for a YAML config file that does not exist yet"""
    return tmp_path / "config" / "instant_upload.yaml"


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Same markers as the other test packages for consistency.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full integration tests")
