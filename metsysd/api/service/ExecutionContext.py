"""Execution context - the ``[Service]`` section of a unit."""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_EXEC_START
from .RestartPolicy import RestartPolicy
from .ServiceType import ServiceType


class ExecutionContext(BaseModel):
    """How the supervisor runs the service."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    exec_start: str = Field(DEFAULT_EXEC_START, description="Command line run by the supervisor (not validated)")
    service_type: ServiceType = Field(ServiceType.SIMPLE, description="Service startup type")
    restart: RestartPolicy = Field(RestartPolicy.NO, description="Restart policy after the service exits")
    user: str | None = Field(None, description="User running the service (must exist)")
    group: str | None = Field(None, description="Group running the service (must exist)")

    def optional_directives(self) -> Iterator[tuple[str, str]]:
        """Yield the optional directives that are set, in unit order (User, Group)."""
        for key, value in (("User", self.user), ("Group", self.group)):
            if value is not None:
                yield key, value
