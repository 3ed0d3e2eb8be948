"""Service definition and its rendering into the systemd unit format."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_AFTER, DEFAULT_DESCRIPTION, DEFAULT_SERVICE_NAME, UNIT_SUFFIX
from .ExecutionContext import ExecutionContext
from .InstallContext import InstallContext

_FORBIDDEN_NAME_CHARS = ("/", "\\", "\0")


class ServiceDefinition(BaseModel):
    """One service unit.

    Built once (defaults filled for anything unset) and never mutated. The
    name is used verbatim as the unit filename, so it must be a single path
    component.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(DEFAULT_SERVICE_NAME, description="Service name, used as '<name>.service'")
    description: str = Field(DEFAULT_DESCRIPTION, description="Unit description")
    after: str = Field(DEFAULT_AFTER, description="Unit ordering dependency")
    exec_ctx: ExecutionContext = Field(default_factory=ExecutionContext)
    install_ctx: InstallContext = Field(default_factory=InstallContext)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("service name must not be empty")
        if any(char in v for char in _FORBIDDEN_NAME_CHARS):
            raise ValueError(f"service name must not contain path separators, got: {v!r}")
        if v in (".", ".."):
            raise ValueError(f"service name must not be {v!r}")
        return v

    @property
    def unit_filename(self) -> str:
        """Filename of the unit, e.g. 'web.service'."""
        return f"{self.name}{UNIT_SUFFIX}"

    def sections(self) -> list[tuple[str, list[tuple[str, str]]]]:
        """Unit sections in fixed order, each with its (key, value) directives."""
        return [
            (
                "Unit",
                [
                    ("Description", self.description),
                    ("After", self.after),
                ],
            ),
            (
                "Service",
                [
                    ("ExecStart", self.exec_ctx.exec_start),
                    ("Type", self.exec_ctx.service_type.token()),
                    ("Restart", self.exec_ctx.restart.token()),
                    *self.exec_ctx.optional_directives(),
                ],
            ),
            (
                "Install",
                [
                    ("WantedBy", self.install_ctx.wanted_by),
                ],
            ),
        ]

    def render(self) -> str:
        """Render the unit file text.

        Every line is ``Key=Value`` followed by a newline; nothing is escaped.
        """
        lines: list[str] = []
        for header, directives in self.sections():
            lines.append(f"[{header}]\n")
            lines.extend(f"{key}={value}\n" for key, value in directives)
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()
