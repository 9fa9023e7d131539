"""Shared pytest fixtures for fwharden tests."""

from unittest.mock import MagicMock

import pytest

from fwharden.core.installer import OverrideInstaller
from fwharden.core.service_manager import ServiceManager


@pytest.fixture
def dropin_dir(tmp_path):
    """Return a Path for a drop-in directory that does not exist yet."""
    return tmp_path / "systemd" / "system" / "firewalld.service.d"


@pytest.fixture
def service_manager():
    """Create a ServiceManager mock whose systemctl calls all succeed."""
    manager = MagicMock(spec=ServiceManager)
    manager.build_command.side_effect = lambda *args: ["systemctl", *args]
    manager.reload_daemon.return_value = (True, None, 0)
    manager.restart_service.return_value = (True, None, 0)
    return manager


@pytest.fixture
def installer(service_manager, dropin_dir):
    """Create an OverrideInstaller that believes it runs as root."""
    return OverrideInstaller(
        service_manager=service_manager,
        dropin_dir=dropin_dir,
        uid_provider=lambda: 0,
    )


@pytest.fixture
def unprivileged_installer(service_manager, dropin_dir):
    """Create an OverrideInstaller running as an ordinary user."""
    return OverrideInstaller(
        service_manager=service_manager,
        dropin_dir=dropin_dir,
        uid_provider=lambda: 1000,
    )
