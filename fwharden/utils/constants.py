"""Application constants and the fixed hardening template."""

from pathlib import Path

# Application metadata
APP_NAME = "fwharden"

# Paths
CONFIG_DIR = Path("/etc/fwharden")
CONFIG_FILE = CONFIG_DIR / "config.yaml"
SYSTEMD_SYSTEM_DIR = Path("/etc/systemd/system")

# Target unit
SERVICE_NAME = "firewalld"
UNIT_NAME = f"{SERVICE_NAME}.service"
DROPIN_DIR = SYSTEMD_SYSTEM_DIR / f"{UNIT_NAME}.d"
OVERRIDE_FILENAME = "hardening.conf"
OVERRIDE_FILE = DROPIN_DIR / OVERRIDE_FILENAME

# Section header of the override file
OVERRIDE_SECTION = "Service"

# Directives written under [Service], in order. Keys may repeat.
HARDENING_DIRECTIVES = (
    ("LogsDirectory", "firewalld"),
    ("CapabilityBoundingSet",
     "CAP_NET_ADMIN CAP_NET_RAW CAP_NET_BIND_SERVICE CAP_SYS_MODULE CAP_SETPCAP CAP_DAC_OVERRIDE"),
    ("AmbientCapabilities", ""),
    ("NoNewPrivileges", "yes"),
    ("ProtectSystem", "strict"),
    ("ReadWritePaths", "/etc/firewalld /run/firewalld /var/lib/firewalld"),
    ("ProtectHome", "yes"),
    ("PrivateTmp", "yes"),
    ("PrivateDevices", "yes"),
    ("ProtectClock", "yes"),
    ("ProtectHostname", "yes"),
    ("ProtectKernelLogs", "yes"),
    ("ProtectControlGroups", "yes"),
    ("RestrictRealtime", "yes"),
    ("RestrictSUIDSGID", "yes"),
    ("RestrictNamespaces", "yes"),
    ("RestrictAddressFamilies", "AF_UNIX AF_NETLINK AF_INET AF_INET6"),
    ("LockPersonality", "yes"),
    ("MemoryDenyWriteExecute", "yes"),
    ("SystemCallArchitectures", "native"),
    ("SystemCallFilter", "@system-service @module"),
    ("SystemCallFilter", "~@mount @swap @reboot @raw-io @obsolete @cpu-emulation"),
    ("UMask", "0077"),
)

# Default settings
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
