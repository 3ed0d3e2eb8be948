"""Service module - service definitions and unit rendering."""

from .build_service_definition import build_service_definition
from .ExecutionContext import ExecutionContext
from .InstallContext import InstallContext
from .RestartPolicy import RestartPolicy
from .ServiceDefinition import ServiceDefinition
from .ServiceType import ServiceType

__all__ = [
    "ExecutionContext",
    "InstallContext",
    "RestartPolicy",
    "ServiceDefinition",
    "ServiceType",
    "build_service_definition",
]
