"""Shared constants for unit generation and installation."""

from pathlib import Path

# System-wide unit directory (assumed to exist, never created)
SYSTEM_SERVICES_DIR = Path("/etc/systemd/system")

# Per-user unit directory, relative to the user's home
USER_SERVICES_NAMESPACE = "systemd"
USER_SERVICES_SUBDIR = Path(".config") / USER_SERVICES_NAMESPACE / "user"

UNIT_SUFFIX = ".service"

SYSTEMCTL = "systemctl"
DAEMON_RELOAD = "daemon-reload"

# Service definition defaults
DEFAULT_SERVICE_NAME = "metsysd-42"
DEFAULT_DESCRIPTION = "This service has been generated with metsysd"
DEFAULT_AFTER = "network.target"
DEFAULT_EXEC_START = "echo 'Hello World'"
DEFAULT_WANTED_BY = "multi-user.target"
