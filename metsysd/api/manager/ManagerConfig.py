"""Installation manager configuration."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .Scope import Scope


class ManagerConfig(BaseModel):
    """Validated, immutable configuration for an InstallationManager."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scope: Scope = Field(Scope.SYSTEM, description="Install for the whole system or the invoking user")
    install_dir: Path | None = Field(None, description="Explicit install directory, used verbatim in any scope")
    with_reload: bool = Field(True, description="Run systemctl daemon-reload after writing the unit")

    @field_validator("install_dir", mode="before")
    @classmethod
    def validate_install_dir(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            raise ValueError("install_dir must not be empty")
        return v
