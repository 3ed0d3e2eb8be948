"""Build an InstallationManager from its configuration."""

from ...utils import get_logger
from .InstallationManager import InstallationManager
from .ManagerConfig import ManagerConfig
from .resolve_install_dir import resolve_install_dir
from .Scope import Scope

logger = get_logger("manager")


def build_manager(config: ManagerConfig | None = None) -> InstallationManager:
    """Build an InstallationManager, resolving the install directory once.

    Only the computed default user directory (user scope, no override) is
    created on demand.

    Raises:
        HomeDirectoryNotFound: If user scope needs the home directory and it is unknown
    """
    if config is None:
        config = ManagerConfig()
    install_dir = resolve_install_dir(config.scope, config.install_dir)
    auto_create_dir = config.install_dir is None and config.scope is Scope.USER
    logger.debug("Resolved install directory %s (scope=%s)", install_dir, config.scope.value)
    return InstallationManager(
        scope=config.scope,
        install_dir=install_dir,
        with_reload=config.with_reload,
        auto_create_dir=auto_create_dir,
    )
