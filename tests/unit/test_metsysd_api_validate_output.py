"""Unit tests for metsysd.api.validate_output."""

import pytest

from metsysd.api.service.cmd_create import cmd_create
from metsysd.api.validate_output import validate_output


def _valid_output() -> dict:
    return {
        "errors": [],
        "warnings": [],
        "name": "test",
        "scope": "system",
        "install_dir": "/tmp",
        "unit_path": "/tmp/test.service",
        "content": "[Unit]\n",
        "dry_run": False,
        "created": True,
        "reloaded": False,
        "reload_status": -1,
    }


def test_validate_output_accepts_schema_output():
    assert validate_output(cmd_create, _valid_output()) == _valid_output()


def test_validate_output_rejects_missing_field():
    output = _valid_output()
    del output["created"]
    with pytest.raises(ValueError, match="ServiceCreateOutput"):
        validate_output(cmd_create, output)


def test_validate_output_passes_through_unregistered():
    def cmd_unknown():
        pass

    assert validate_output(cmd_unknown, {"anything": 1}) == {"anything": 1}
