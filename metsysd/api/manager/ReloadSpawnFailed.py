"""Daemon reload spawn error."""

from .ServiceInstallError import ServiceInstallError


class ReloadSpawnFailed(ServiceInstallError):
    """Raised when the systemctl daemon-reload process cannot be launched."""

    def __init__(self, args: list[str], reason: str):
        self.command = args
        super().__init__(f"Couldn't reload systemd daemon: failed to run {' '.join(args)!r} ({reason})")
