"""Get the per-user systemd unit directory."""

import os
import pwd
from pathlib import Path

from ...constants import USER_SERVICES_SUBDIR
from .HomeDirectoryNotFound import HomeDirectoryNotFound


def get_user_install_dir() -> Path:
    """Get the per-user unit directory, ``<home>/.config/systemd/user``.

    Checks the HOME environment variable first (for test isolation). An unset
    or empty HOME falls back to the password database entry of the current
    user.

    Raises:
        HomeDirectoryNotFound: If the home directory cannot be determined
    """
    home_env = os.environ.get("HOME")
    if home_env:
        return Path(home_env) / USER_SERVICES_SUBDIR

    try:
        home_dir = pwd.getpwuid(os.getuid()).pw_dir
    except (KeyError, OSError) as e:
        raise HomeDirectoryNotFound() from e
    if not home_dir:
        raise HomeDirectoryNotFound()
    return Path(home_dir) / USER_SERVICES_SUBDIR
