"""Data models for systemd unit state."""

from enum import Enum


class ServiceStatus(Enum):
    """Enumeration of possible service states."""

    ACTIVE = "active"
    RELOADING = "reloading"
    INACTIVE = "inactive"
    FAILED = "failed"
    ACTIVATING = "activating"
    DEACTIVATING = "deactivating"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, status_str: str) -> 'ServiceStatus':
        """Convert a string to ServiceStatus enum.

        Args:
            status_str: ActiveState string from systemctl

        Returns:
            ServiceStatus enum value
        """
        try:
            return cls(status_str.strip().lower())
        except ValueError:
            return cls.UNKNOWN
