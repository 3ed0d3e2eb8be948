"""Unit tests for metsysd.api.manager.build_manager."""

from pathlib import Path

from metsysd.api.manager.build_manager import build_manager
from metsysd.api.manager.ManagerConfig import ManagerConfig
from metsysd.api.manager.Scope import Scope


def test_build_manager_defaults():
    manager = build_manager()
    assert manager.scope is Scope.SYSTEM
    assert manager.install_dir == Path("/etc/systemd/system")
    assert manager.with_reload is True
    assert manager.auto_create_dir is False


def test_build_manager_with_user(user_home):
    manager = build_manager(ManagerConfig(scope=Scope.USER))
    assert manager.scope is Scope.USER
    assert manager.install_dir == user_home / ".config/systemd/user"
    assert manager.auto_create_dir is True


def test_build_manager_does_not_create_user_dir(user_home):
    build_manager(ManagerConfig(scope=Scope.USER))
    assert not (user_home / ".config").exists()


def test_build_manager_with_install_dir():
    manager = build_manager(ManagerConfig(install_dir=Path("/tmp")))
    assert manager.scope is Scope.SYSTEM
    assert manager.install_dir == Path("/tmp")
    assert manager.auto_create_dir is False


def test_build_manager_with_install_dir_and_user(user_home):
    manager = build_manager(ManagerConfig(scope=Scope.USER, install_dir=Path("/tmp")))
    assert manager.scope is Scope.USER
    assert manager.install_dir == Path("/tmp")
    assert manager.auto_create_dir is False


def test_build_manager_override_equal_to_user_default_is_not_auto_created(user_home):
    default_dir = user_home / ".config/systemd/user"
    manager = build_manager(ManagerConfig(scope=Scope.USER, install_dir=default_dir))
    assert manager.auto_create_dir is False


def test_build_manager_without_reload():
    manager = build_manager(ManagerConfig(with_reload=False))
    assert manager.with_reload is False
