"""Install scope enum."""

from enum import Enum


class Scope(str, Enum):
    USER = "user"
    SYSTEM = "system"

    def systemctl_args(self) -> list[str]:
        """Scope flag for systemctl (``--user`` for user scope, nothing for system)."""
        return ["--user"] if self is Scope.USER else []
