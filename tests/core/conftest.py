"""
Core Test Configuration and Fixtures

To run:
    pytest tests/core/
"""

import pytest


@pytest.fixture
def fake_sys_class_net(tmp_path):
    """
    Provide a fake /sys/class/net directory.

    Returns a helper adding interfaces to it.

    Usage:
        def test_wifi(fake_sys_class_net):
            root = fake_sys_class_net("wlan0", wireless=True, operstate="up")
    """
    root = tmp_path / "net"
    root.mkdir()

    def add_interface(name: str, wireless: bool = False, operstate: str = "up"):
        interface = root / name
        interface.mkdir()
        (interface / "operstate").write_text(f"{operstate}\n")
        if wireless:
            (interface / "wireless").mkdir()
        return root

    add_interface.root = root
    return add_interface


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full integration tests")
