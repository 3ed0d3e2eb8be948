"""Manager module - unit installation and systemd reload."""

from .build_manager import build_manager
from .CreateResult import CreateResult
from .FileCreateFailed import FileCreateFailed
from .get_user_install_dir import get_user_install_dir
from .HomeDirectoryNotFound import HomeDirectoryNotFound
from .InstallationManager import InstallationManager
from .ManagerConfig import ManagerConfig
from .ReloadSpawnFailed import ReloadSpawnFailed
from .resolve_install_dir import resolve_install_dir
from .Scope import Scope
from .ServiceInstallError import ServiceInstallError

__all__ = [
    "CreateResult",
    "FileCreateFailed",
    "HomeDirectoryNotFound",
    "InstallationManager",
    "ManagerConfig",
    "ReloadSpawnFailed",
    "Scope",
    "ServiceInstallError",
    "build_manager",
    "get_user_install_dir",
    "resolve_install_dir",
]
