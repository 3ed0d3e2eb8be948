"""Install context - the ``[Install]`` section of a unit."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_WANTED_BY


class InstallContext(BaseModel):
    """Install context."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    wanted_by: str = Field(DEFAULT_WANTED_BY, description="Target that wants this service")
