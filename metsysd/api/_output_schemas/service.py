"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceCreateOutput(BaseOutputSchema):
    """Output schema for service create command.

    All fields must always be present for consistency.
    """
    name: str = Field(..., description="Service name, empty string if the definition was invalid")
    scope: str = Field(..., description="Install scope: 'user' or 'system'")
    install_dir: str = Field(..., description="Resolved install directory, empty string if unresolved")
    unit_path: str = Field(..., description="Path of the unit file, empty string if unresolved")
    content: str = Field(..., description="Rendered unit file text, empty string if the definition was invalid")
    dry_run: bool = Field(..., description="Whether this was a dry run (nothing written)")
    created: bool = Field(..., description="Whether the unit file was written")
    reloaded: bool = Field(..., description="Whether a daemon-reload was spawned or run")
    reload_status: int = Field(..., description="Exit status of a waited daemon-reload, -1 if not waited on")


register_output_schema("service", "create", ServiceCreateOutput)
