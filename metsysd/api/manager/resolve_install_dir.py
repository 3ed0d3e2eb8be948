"""Resolve the directory a unit is installed into."""

from pathlib import Path

from ...constants import SYSTEM_SERVICES_DIR
from .get_user_install_dir import get_user_install_dir
from .Scope import Scope


def resolve_install_dir(scope: Scope, install_dir: Path | None = None) -> Path:
    """Resolve the install directory.

    An explicit override wins regardless of scope. Otherwise system scope uses
    /etc/systemd/system and user scope uses ~/.config/systemd/user.

    Raises:
        HomeDirectoryNotFound: If user scope needs the home directory and it is unknown
    """
    if install_dir is not None:
        return install_dir
    if scope is Scope.USER:
        return get_user_install_dir()
    return SYSTEM_SERVICES_DIR
