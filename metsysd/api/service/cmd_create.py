"""Service create command - renders a unit and installs it."""

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from ...utils import get_logger
from .._output_schemas.service import ServiceCreateOutput
from ..manager.build_manager import build_manager
from ..manager.ManagerConfig import ManagerConfig
from ..manager.resolve_install_dir import resolve_install_dir
from ..manager.Scope import Scope
from ..manager.ServiceInstallError import ServiceInstallError
from ..StageResult import StageResult
from .build_service_definition import build_service_definition
from .RestartPolicy import RestartPolicy
from .ServiceType import ServiceType

logger = get_logger("service")


def _validation_messages(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {item['msg']}" if location else item["msg"])
    return messages


def cmd_create(
    command: str | None = None,
    name: str | None = None,
    service_type: ServiceType | str | None = None,
    restart: RestartPolicy | str | None = None,
    user: str | None = None,
    group: str | None = None,
    description: str | None = None,
    after: str | None = None,
    wanted_by: str | None = None,
    is_user: bool = False,
    install_dir: Path | str | None = None,
    daemon_reload: bool = True,
    wait_reload: bool = False,
    dry_run: bool = False,
) -> StageResult:
    """Create a systemd service unit.

    Unset (None) definition fields get their defaults. With ``dry_run`` the
    unit is only rendered: nothing is written, no directory is created and
    no reload is spawned.

    A failed install is reported as ``success=False`` (non-zero exit in the CLI).
    """
    scope = Scope.USER if is_user else Scope.SYSTEM

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        output = ServiceCreateOutput(
            errors=[],
            warnings=[],
            name="",
            scope=scope.value,
            install_dir="",
            unit_path="",
            content="",
            dry_run=dry_run,
            created=False,
            reloaded=False,
            reload_status=-1,
        )

        def fail(message: str, errors: list[str]) -> None:
            result_obj.result = f"Error creating service: {message}"
            result_obj.output = output.model_copy(update={"errors": errors}).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Building service definition...")
        try:
            definition = build_service_definition(
                name=name,
                command=command,
                service_type=service_type,
                restart=restart,
                user=user,
                group=group,
                description=description,
                after=after,
                wanted_by=wanted_by,
            )
            config = ManagerConfig(
                scope=scope,
                install_dir=install_dir,
                with_reload=False,
            )
        except ValidationError as e:
            errors = _validation_messages(e)
            logger.error("Invalid service configuration: %s", "; ".join(errors))
            yield (1.0, "Complete")
            fail("invalid service configuration", errors)
            return

        content = definition.render()
        output = output.model_copy(update={"name": definition.name, "content": content})

        if dry_run:
            yield (0.5, "Dry run enabled, not creating service")
            try:
                target_dir = resolve_install_dir(config.scope, config.install_dir)
            except ServiceInstallError as e:
                warnings = [str(e)]
            else:
                warnings = []
                output = output.model_copy(
                    update={
                        "install_dir": str(target_dir),
                        "unit_path": str(target_dir / definition.unit_filename),
                    }
                )
            yield (1.0, "Complete")
            result_obj.result = f"Dry run: rendered {definition.unit_filename} (nothing written)"
            result_obj.output = output.model_copy(update={"warnings": warnings}).model_dump(mode="python")
            result_obj.success = True
            return

        try:
            yield (0.3, "Resolving install directory...")
            manager = build_manager(config)
            output = output.model_copy(
                update={
                    "install_dir": str(manager.install_dir),
                    "unit_path": str(manager.unit_path(definition)),
                }
            )

            yield (0.5, f"Writing {definition.unit_filename}...")
            manager.create(definition)
            output = output.model_copy(update={"created": True})

            if daemon_reload and not wait_reload:
                manager.reload()
                output = output.model_copy(update={"reloaded": True})

            if daemon_reload and wait_reload:
                yield (0.8, "Reloading systemd daemon...")
                reload_status = manager.reload_and_wait()
                output = output.model_copy(update={"reloaded": True, "reload_status": reload_status})
                if reload_status != 0:
                    output = output.model_copy(
                        update={"warnings": [f"systemctl daemon-reload exited with status {reload_status}"]}
                    )
        except ServiceInstallError as e:
            logger.error("Error creating service %s: %s", definition.name, e)
            yield (1.0, "Complete")
            fail(str(e), [str(e)])
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service created successfully ({output.unit_path})"
        result_obj.output = output.model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Creating service...",
        progress_callback=do_work,
    )
