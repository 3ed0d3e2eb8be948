"""Unit tests for install directory resolution."""

import pwd
from pathlib import Path
from types import SimpleNamespace

import pytest

from metsysd.api.manager.get_user_install_dir import get_user_install_dir
from metsysd.api.manager.HomeDirectoryNotFound import HomeDirectoryNotFound
from metsysd.api.manager.resolve_install_dir import resolve_install_dir
from metsysd.api.manager.Scope import Scope


def _no_passwd_entry(uid):
    raise KeyError(f"getpwuid(): uid not found: {uid}")


def _passwd_home(home_dir: str):
    return lambda uid: SimpleNamespace(pw_dir=home_dir)


def test_system_scope_without_override():
    assert resolve_install_dir(Scope.SYSTEM) == Path("/etc/systemd/system")


def test_user_scope_without_override(user_home):
    assert resolve_install_dir(Scope.USER) == user_home / ".config" / "systemd" / "user"


@pytest.mark.parametrize("scope", list(Scope))
def test_override_used_verbatim(scope, tmp_path):
    override = tmp_path / "custom" / ".." / "units"
    assert resolve_install_dir(scope, override) == override


def test_override_wins_even_without_home(monkeypatch, tmp_path):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setattr(pwd, "getpwuid", _no_passwd_entry)
    assert resolve_install_dir(Scope.USER, tmp_path) == tmp_path


def test_user_dir_falls_back_to_passwd_entry(monkeypatch, tmp_path):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setattr(pwd, "getpwuid", _passwd_home(str(tmp_path)))
    assert get_user_install_dir() == tmp_path / ".config" / "systemd" / "user"


def test_empty_home_is_treated_as_unset(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", "")
    monkeypatch.setattr(pwd, "getpwuid", _passwd_home(str(tmp_path)))
    assert get_user_install_dir() == tmp_path / ".config" / "systemd" / "user"


def test_empty_home_never_resolves_to_root(monkeypatch):
    monkeypatch.setenv("HOME", "")
    monkeypatch.setattr(pwd, "getpwuid", _passwd_home(""))
    with pytest.raises(HomeDirectoryNotFound):
        get_user_install_dir()


def test_home_directory_not_found(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setattr(pwd, "getpwuid", _no_passwd_entry)
    with pytest.raises(HomeDirectoryNotFound, match="home directory"):
        resolve_install_dir(Scope.USER)


def test_system_scope_does_not_need_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setattr(pwd, "getpwuid", _no_passwd_entry)
    assert resolve_install_dir(Scope.SYSTEM) == Path("/etc/systemd/system")
