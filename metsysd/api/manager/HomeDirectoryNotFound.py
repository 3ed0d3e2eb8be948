"""Home directory lookup error."""

from .ServiceInstallError import ServiceInstallError


class HomeDirectoryNotFound(ServiceInstallError):
    """Raised when the user install directory is needed but the home directory is unknown."""

    def __init__(self):
        super().__init__("Couldn't find home directory (set HOME or use --install-dir)")
