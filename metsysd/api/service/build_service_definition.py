"""Build a ServiceDefinition from optional configuration values."""

from typing import Any

from .ExecutionContext import ExecutionContext
from .InstallContext import InstallContext
from .RestartPolicy import RestartPolicy
from .ServiceDefinition import ServiceDefinition
from .ServiceType import ServiceType


def _set_only(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def build_service_definition(
    name: str | None = None,
    command: str | None = None,
    service_type: ServiceType | str | None = None,
    restart: RestartPolicy | str | None = None,
    user: str | None = None,
    group: str | None = None,
    description: str | None = None,
    after: str | None = None,
    wanted_by: str | None = None,
) -> ServiceDefinition:
    """Build a ServiceDefinition, filling every unset (None) field with its default.

    Raises:
        pydantic.ValidationError: If a value is invalid (e.g., a name containing '/')
    """
    exec_ctx = ExecutionContext(
        **_set_only(exec_start=command, service_type=service_type, restart=restart, user=user, group=group)
    )
    install_ctx = InstallContext(**_set_only(wanted_by=wanted_by))
    return ServiceDefinition(
        **_set_only(name=name, description=description, after=after),
        exec_ctx=exec_ctx,
        install_ctx=install_ctx,
    )
