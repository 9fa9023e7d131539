"""Helper for checking the effective privilege of the current process."""

import logging
import os

logger = logging.getLogger(__name__)


class PrivilegeHelper:
    """Helper for root checks before touching /etc/systemd."""

    ROOT_UID = 0

    @staticmethod
    def get_effective_uid() -> int:
        """Get the effective uid of this process.

        Returns:
            Effective user id
        """
        return os.geteuid()

    @staticmethod
    def is_root(uid: int | None = None) -> bool:
        """Check if the given (or current effective) uid is the superuser.

        Args:
            uid: Optional uid to test instead of the current effective uid

        Returns:
            True if running as root, False otherwise
        """
        if uid is None:
            uid = PrivilegeHelper.get_effective_uid()
        logger.debug(f"Effective uid is {uid}")
        return uid == PrivilegeHelper.ROOT_UID
