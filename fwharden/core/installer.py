"""Installs the firewalld hardening drop-in and restarts the service."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .errors import FilesystemError, InsufficientPrivilegeError, ServiceManagerError
from .service_manager import ServiceManager
from ..models.override import HARDENING_OVERRIDE, OverrideConfig
from ..utils.constants import DROPIN_DIR, OVERRIDE_FILENAME, SERVICE_NAME
from ..utils.privilege import PrivilegeHelper

logger = logging.getLogger(__name__)


@dataclass
class VerifyResult:
    """Outcome of comparing the override file on disk with the template.

    Attributes:
        path: Override file that was checked
        exists: Whether the file exists
        matches: Whether its content equals the template byte-for-byte
        differences: (marker, line) pairs, '-' missing from disk, '+' extra on disk
    """

    path: Path
    exists: bool
    matches: bool
    differences: List[Tuple[str, str]] = field(default_factory=list)


class OverrideInstaller:
    """Writes the hardening override and applies it.

    Every step raises on failure and nothing is rolled back; the first
    error aborts the run.
    """

    def __init__(
        self,
        service_manager: Optional[ServiceManager] = None,
        override: OverrideConfig = HARDENING_OVERRIDE,
        dropin_dir: Path = DROPIN_DIR,
        service_name: str = SERVICE_NAME,
        uid_provider: Callable[[], int] = PrivilegeHelper.get_effective_uid,
    ):
        """Initialize the installer.

        Args:
            service_manager: ServiceManager used for systemctl calls
            override: Override to write
            dropin_dir: Drop-in directory of the target unit
            service_name: Unit to restart
            uid_provider: Returns the effective uid to check
        """
        self.service_manager = service_manager or ServiceManager()
        self.override = override
        self.dropin_dir = Path(dropin_dir)
        self.service_name = service_name
        self.uid_provider = uid_provider

    @property
    def override_file(self) -> Path:
        return self.dropin_dir / OVERRIDE_FILENAME

    def render(self) -> str:
        """Get the exact text written by install()."""
        return self.override.render()

    def check_privilege(self):
        """Abort unless running as root.

        Raises:
            InsufficientPrivilegeError: If the effective uid is not 0
        """
        uid = self.uid_provider()
        if not PrivilegeHelper.is_root(uid):
            raise InsufficientPrivilegeError(
                f"This command must be run as root (effective uid is {uid})"
            )

    def ensure_directory(self, path: Path):
        """Create a directory and any missing parents.

        Args:
            path: Directory to create

        Raises:
            FilesystemError: If the directory cannot be created
        """
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Cannot create directory {path}: {e}", path) from e
        logger.info(f"Ensured directory {path}")

    def write_override_file(self, path: Path, content: str):
        """Replace the file at path with content.

        Args:
            path: File to write
            content: Full file content

        Raises:
            FilesystemError: If the file cannot be written
        """
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise FilesystemError(f"Cannot write {path}: {e}", path) from e
        logger.info(f"Wrote {len(content)} bytes to {path}")

    def reload_daemon(self):
        """Run systemctl daemon-reload.

        Raises:
            ServiceManagerError: If systemctl fails
        """
        success, error_msg, returncode = self.service_manager.reload_daemon()
        if not success:
            raise ServiceManagerError(
                f"daemon-reload failed: {error_msg}",
                self.service_manager.build_command("daemon-reload"),
                returncode,
            )

    def restart_service(self, name: str):
        """Run systemctl restart for a unit.

        Args:
            name: Unit to restart

        Raises:
            ServiceManagerError: If systemctl fails
        """
        success, error_msg, returncode = self.service_manager.restart_service(name)
        if not success:
            raise ServiceManagerError(
                f"restart of {name} failed: {error_msg}",
                self.service_manager.build_command("restart", name),
                returncode,
            )

    def install(self) -> str:
        """Write the override, reload systemd and restart the service.

        Returns:
            Status message for the operator
        """
        self.check_privilege()
        self.ensure_directory(self.dropin_dir)
        self.write_override_file(self.override_file, self.render())
        self.reload_daemon()
        self.restart_service(self.service_name)

        message = (
            f"Hardening override installed at {self.override_file} "
            f"and {self.service_name} restarted. "
            f"Check it with: systemctl status {self.service_name}"
        )
        logger.info(message)
        return message

    def revert(self) -> str:
        """Remove the override, reload systemd and restart the service.

        Does nothing beyond the privilege check if no override is installed.

        Returns:
            Status message for the operator
        """
        self.check_privilege()

        if not self.override_file.exists():
            message = f"No override at {self.override_file}, nothing to revert"
            logger.info(message)
            return message

        try:
            self.override_file.unlink()
        except OSError as e:
            raise FilesystemError(f"Cannot remove {self.override_file}: {e}", self.override_file) from e
        logger.info(f"Removed {self.override_file}")

        self._remove_empty_dropin_dir()
        self.reload_daemon()
        self.restart_service(self.service_name)

        message = f"Hardening override removed and {self.service_name} restarted"
        logger.info(message)
        return message

    def verify(self) -> VerifyResult:
        """Compare the installed override with the template.

        Returns:
            VerifyResult describing the file on disk
        """
        path = self.override_file
        try:
            on_disk = path.read_bytes()
        except FileNotFoundError:
            return VerifyResult(path=path, exists=False, matches=False)
        except OSError as e:
            raise FilesystemError(f"Cannot read {path}: {e}", path) from e

        if on_disk == self.render().encode("utf-8"):
            return VerifyResult(path=path, exists=True, matches=True)

        try:
            differences = self.override.diff(OverrideConfig.from_text(on_disk.decode("utf-8")))
        except ValueError as e:
            # UnicodeDecodeError included
            differences = [("!", str(e))]

        if not differences:
            # Same directives; formatting, line endings or order differ
            differences = [("!", "content differs in formatting, line endings or directive order")]

        return VerifyResult(path=path, exists=True, matches=False, differences=differences)

    def _remove_empty_dropin_dir(self):
        """Remove the drop-in directory if the override was its only file."""
        try:
            if any(self.dropin_dir.iterdir()):
                return
            self.dropin_dir.rmdir()
        except OSError as e:
            raise FilesystemError(f"Cannot remove {self.dropin_dir}: {e}", self.dropin_dir) from e
        logger.info(f"Removed empty directory {self.dropin_dir}")
