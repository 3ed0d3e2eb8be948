"""Unit file creation error."""

from pathlib import Path

from .ServiceInstallError import ServiceInstallError


class FileCreateFailed(ServiceInstallError):
    """Raised when the unit file cannot be created or written.

    The underlying OSError is chained as ``__cause__``.
    """

    def __init__(self, install_dir: Path, unit_path: Path, reason: str):
        self.install_dir = install_dir
        self.unit_path = unit_path
        message = (
            f"Couldn't create '{unit_path}': is '{install_dir}' an existing, writable directory? ({reason})\n"
            "Hint: You can use --install-dir to specify a custom path"
        )
        super().__init__(message)
