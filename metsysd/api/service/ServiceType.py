"""Service type enum (systemd ``Type=``)."""

from enum import Enum
from typing import assert_never


class ServiceType(str, Enum):
    SIMPLE = "simple"
    FORKING = "forking"
    ONESHOT = "oneshot"
    IDLE = "idle"

    def token(self) -> str:
        """Unit file token for this service type."""
        match self:
            case ServiceType.SIMPLE:
                return "simple"
            case ServiceType.FORKING:
                return "forking"
            case ServiceType.ONESHOT:
                return "oneshot"
            case ServiceType.IDLE:
                return "idle"
            case _:
                assert_never(self)
