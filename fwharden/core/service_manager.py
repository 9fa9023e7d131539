"""Service manager for interacting with systemd via systemctl."""

import subprocess
import logging
from typing import List, Tuple, Optional
from ..models.service import ServiceStatus

logger = logging.getLogger(__name__)

ActionResult = Tuple[bool, Optional[str], Optional[int]]


class ServiceManager:
    """Runs system-level systemctl commands.

    The caller is expected to be root already, so commands are run
    directly and without a timeout.
    """

    def __init__(self, systemctl: str = "systemctl"):
        """Initialize the service manager.

        Args:
            systemctl: Name or path of the systemctl binary
        """
        self.systemctl = systemctl

    def build_command(self, *args: str) -> List[str]:
        """Build a systemctl command line.

        Args:
            *args: Arguments passed after the binary

        Returns:
            Command as a list suitable for subprocess.run
        """
        return [self.systemctl, *args]

    def reload_daemon(self) -> ActionResult:
        """Make systemd re-read unit files and drop-ins.

        Returns:
            Tuple of (success, error_message, returncode)
        """
        return self._execute_systemctl_action("daemon-reload")

    def restart_service(self, service_name: str) -> ActionResult:
        """Restart a system service.

        Args:
            service_name: Name of the systemd service

        Returns:
            Tuple of (success, error_message, returncode)
        """
        return self._execute_systemctl_action("restart", service_name)

    def get_service_status(self, service_name: str) -> ServiceStatus:
        """Get the current status of a service.

        Args:
            service_name: Name of the systemd service

        Returns:
            ServiceStatus enum value
        """
        cmd = self.build_command("show", service_name, "--property=ActiveState", "--value")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True
            )
            return ServiceStatus.from_string(result.stdout)

        except subprocess.CalledProcessError as e:
            logger.error(f"Failed to get status for {service_name}: {e.stderr}")
            return ServiceStatus.UNKNOWN
        except OSError as e:
            logger.error(f"Could not run {self.systemctl}: {e}")
            return ServiceStatus.UNKNOWN

    def _execute_systemctl_action(self, action: str, *args: str) -> ActionResult:
        """Execute a systemctl action (daemon-reload, restart, etc.).

        Args:
            action: Systemctl verb
            *args: Unit names or further arguments

        Returns:
            Tuple of (success, error_message, returncode)
        """
        cmd = self.build_command(action, *args)
        target = " ".join(args) or "systemd"
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True
            )
            logger.info(f"Successfully ran {action} for {target}")
            return True, None, 0

        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else f"Failed to {action} {target}"
            logger.error(f"Failed to {action} {target}: {error_msg}")
            return False, error_msg, e.returncode

        except OSError as e:
            error_msg = f"Could not run {self.systemctl}: {e}"
            logger.error(error_msg)
            return False, error_msg, None
