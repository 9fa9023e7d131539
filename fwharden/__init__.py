"""fwharden - Apply a systemd hardening override to firewalld."""

__version__ = "1.0.0"
