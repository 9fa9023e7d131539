"""Utility functions and constants."""

from .constants import *
from .privilege import PrivilegeHelper

__all__ = ["APP_NAME", "CONFIG_FILE", "OVERRIDE_FILE", "SERVICE_NAME", "PrivilegeHelper"]
