"""Unit tests for metsysd.cli.main."""

import io
from contextlib import redirect_stderr, redirect_stdout


def run_cli(args):
    """Execute CLI command and capture stdout/stderr."""
    from metsysd.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        try:
            rc = main(args)
        except SystemExit as exc:  # CLI exits after every command
            rc = exc.code if isinstance(exc.code, int) else 0
    return rc, out_buf.getvalue(), err_buf.getvalue()


def test_version():
    rc, out, _err = run_cli(["--version"])
    assert rc == 0
    assert out.startswith("metsysd ")


def test_dry_run_via_main(user_home):
    rc, out, _err = run_cli(["create", "echo hi", "--name", "test", "--user", "alice", "--group", "staff", "-d"])
    assert rc == 0
    assert "Restart=no\nUser=alice\nGroup=staff\n[Install]\n" in out


def test_version_short_flag():
    rc, out, _err = run_cli(["-v"])
    assert rc == 0
    assert out.startswith("metsysd ")


def test_version_flag_after_subcommand_is_an_option_value(user_home):
    rc, out, _err = run_cli(["create", "echo hi", "--user", "-v", "-d"])
    assert rc == 0
    assert "User=-v\n" in out
    assert not out.startswith("metsysd ")
