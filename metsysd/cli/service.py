"""Service commands for the metsysd CLI."""

from pathlib import Path

import typer

from metsysd.api.service.cmd_create import cmd_create
from metsysd.api.service.RestartPolicy import RestartPolicy
from metsysd.api.service.ServiceType import ServiceType
from metsysd.cli._handle_stage_result import _handle_stage_result


def _print_unit(output: dict) -> None:
    typer.echo(output["content"], nl=False)


def create_cmd(
    command: str = typer.Argument(..., help="The command which will be executed when running the service"),
    name: str | None = typer.Option(None, "--name", "-n", help="Name of the service you want to create"),
    service_type: ServiceType | None = typer.Option(  # noqa: B008
        None,
        "--service-type",
        case_sensitive=False,
        help="Kind of service (see systemd.service(5) Type=)",
    ),
    restart: RestartPolicy | None = typer.Option(  # noqa: B008
        None, "--restart", case_sensitive=False, help="Restart policy of the service"
    ),
    user: str | None = typer.Option(None, "--user", help="User running the service (it must exist)"),
    group: str | None = typer.Option(None, "--group", help="Group running the service (it must exist)"),
    description: str | None = typer.Option(None, "--description", help="Unit description"),
    after: str | None = typer.Option(None, "--after", help="Unit the service is ordered after"),
    wanted_by: str | None = typer.Option(None, "--wanted-by", help="Target that wants the service"),
    is_user: bool = typer.Option(
        False,
        "--is-user",
        help="Install as a user (rootless) service, started when the user runs a session on the host",
    ),
    install_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--install-dir",
        help="Directory to install the service to. Only use when you know what you're doing.",
    ),
    daemon_reload: bool = typer.Option(
        True, "--daemon-reload/--no-daemon-reload", help="Run daemon-reload when the service has been created"
    ),
    wait_reload: bool = typer.Option(
        False, "--wait-reload", help="Wait for daemon-reload to finish and report its exit status"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-d", help="Print the generated service instead of creating it"
    ),
) -> None:
    """Generate a systemd service and install it."""
    handler = _handle_stage_result(cmd_create, result_printer=_print_unit if dry_run else None)
    handler(
        command=command,
        name=name,
        service_type=service_type,
        restart=restart,
        user=user,
        group=group,
        description=description,
        after=after,
        wanted_by=wanted_by,
        is_user=is_user,
        install_dir=install_dir,
        daemon_reload=daemon_reload,
        wait_reload=wait_reload,
        dry_run=dry_run,
    )
