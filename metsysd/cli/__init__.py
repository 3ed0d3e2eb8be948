"""CLI - main entry point."""

import sys
from itertools import takewhile


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from metsysd.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    # Only global flags ahead of the subcommand; later tokens belong to it
    leading = list(takewhile(lambda arg: arg.startswith("-"), argv))
    if "--version" in leading or "-v" in leading:
        from metsysd.utils.get_package_version import get_package_version

        print(f"metsysd {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
