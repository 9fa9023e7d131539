"""Core functionality for installing the hardening override."""

from .config_manager import ConfigManager
from .errors import FilesystemError, HardeningError, InsufficientPrivilegeError, ServiceManagerError
from .installer import OverrideInstaller, VerifyResult
from .service_manager import ServiceManager

__all__ = [
    "ConfigManager",
    "FilesystemError",
    "HardeningError",
    "InsufficientPrivilegeError",
    "OverrideInstaller",
    "ServiceManager",
    "ServiceManagerError",
    "VerifyResult",
]
