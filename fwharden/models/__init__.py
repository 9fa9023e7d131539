"""Data models for the hardening override."""

from .override import HARDENING_OVERRIDE, OverrideConfig
from .service import ServiceStatus

__all__ = ["HARDENING_OVERRIDE", "OverrideConfig", "ServiceStatus"]
