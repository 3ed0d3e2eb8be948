"""Restart policy enum (systemd ``Restart=``)."""

from enum import Enum
from typing import assert_never


class RestartPolicy(str, Enum):
    ALWAYS = "always"
    ON_FAILURE = "on-failure"
    ON_SUCCESS = "on-success"
    NO = "no"

    def token(self) -> str:
        """Unit file token for this restart policy."""
        match self:
            case RestartPolicy.ALWAYS:
                return "always"
            case RestartPolicy.ON_FAILURE:
                return "on-failure"
            case RestartPolicy.ON_SUCCESS:
                return "on-success"
            case RestartPolicy.NO:
                return "no"
            case _:
                assert_never(self)
