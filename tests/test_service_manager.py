"""Tests for the systemctl wrapper."""

import subprocess
from unittest.mock import MagicMock, patch

from fwharden.core.service_manager import ServiceManager
from fwharden.models.service import ServiceStatus


def _completed(stdout=""):
    return MagicMock(returncode=0, stdout=stdout, stderr="")


@patch("fwharden.core.service_manager.subprocess.run")
def test_reload_daemon_runs_systemctl(mock_run):
    mock_run.return_value = _completed()

    result = ServiceManager().reload_daemon()

    assert result == (True, None, 0)
    cmd = mock_run.call_args.args[0]
    assert cmd == ["systemctl", "daemon-reload"]
    assert "timeout" not in mock_run.call_args.kwargs
    assert mock_run.call_args.kwargs["check"] is True


@patch("fwharden.core.service_manager.subprocess.run")
def test_restart_service_runs_systemctl(mock_run):
    mock_run.return_value = _completed()

    ServiceManager().restart_service("firewalld")

    assert mock_run.call_args.args[0] == ["systemctl", "restart", "firewalld"]


@patch("fwharden.core.service_manager.subprocess.run")
def test_custom_systemctl_binary(mock_run):
    mock_run.return_value = _completed()

    ServiceManager(systemctl="/usr/bin/systemctl").reload_daemon()

    assert mock_run.call_args.args[0][0] == "/usr/bin/systemctl"


@patch("fwharden.core.service_manager.subprocess.run")
def test_failed_action_returns_stderr_and_code(mock_run):
    mock_run.side_effect = subprocess.CalledProcessError(
        5, ["systemctl", "restart", "firewalld"], stderr="Unit firewalld.service not found.\n"
    )

    success, error_msg, returncode = ServiceManager().restart_service("firewalld")

    assert success is False
    assert error_msg == "Unit firewalld.service not found."
    assert returncode == 5


@patch("fwharden.core.service_manager.subprocess.run")
def test_failed_action_without_stderr(mock_run):
    mock_run.side_effect = subprocess.CalledProcessError(1, ["systemctl", "daemon-reload"], stderr="")

    success, error_msg, _ = ServiceManager().reload_daemon()

    assert success is False
    assert error_msg == "Failed to daemon-reload systemd"


@patch("fwharden.core.service_manager.subprocess.run")
def test_missing_systemctl_binary(mock_run):
    mock_run.side_effect = FileNotFoundError(2, "No such file or directory")

    success, error_msg, returncode = ServiceManager().reload_daemon()

    assert success is False
    assert "Could not run systemctl" in error_msg
    assert returncode is None


@patch("fwharden.core.service_manager.subprocess.run")
def test_get_service_status(mock_run):
    mock_run.return_value = _completed("active\n")

    status = ServiceManager().get_service_status("firewalld")

    assert status is ServiceStatus.ACTIVE
    assert mock_run.call_args.args[0] == [
        "systemctl", "show", "firewalld", "--property=ActiveState", "--value"
    ]


@patch("fwharden.core.service_manager.subprocess.run")
def test_get_service_status_on_error_is_unknown(mock_run):
    mock_run.side_effect = subprocess.CalledProcessError(1, ["systemctl"], stderr="boom")

    assert ServiceManager().get_service_status("firewalld") is ServiceStatus.UNKNOWN


def test_status_from_unexpected_string():
    assert ServiceStatus.from_string("maintenance") is ServiceStatus.UNKNOWN
    assert ServiceStatus.from_string("Failed") is ServiceStatus.FAILED
