"""Installation manager - writes unit files and reloads systemd."""

import os
import subprocess
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from ...constants import DAEMON_RELOAD, SYSTEMCTL
from ...utils import get_logger
from ..service.ServiceDefinition import ServiceDefinition
from .CreateResult import CreateResult
from .FileCreateFailed import FileCreateFailed
from .ReloadSpawnFailed import ReloadSpawnFailed
from .Scope import Scope

logger = get_logger("manager")


@dataclass(frozen=True)
class InstallationManager:
    """Installs service units into a resolved directory.

    Build with ``build_manager(config)``. The directory is resolved once at
    build time; ``auto_create_dir`` is only set for the computed default user
    directory; the system directory and explicit overrides must already exist.
    """

    scope: Scope
    install_dir: Path
    with_reload: bool = True
    auto_create_dir: bool = False

    def unit_path(self, definition: ServiceDefinition) -> Path:
        """Path the unit file for ``definition`` is written to."""
        return self.install_dir / definition.unit_filename

    def reload_args(self) -> list[str]:
        """systemctl command line for the scope-aware daemon-reload."""
        return [SYSTEMCTL, *self.scope.systemctl_args(), DAEMON_RELOAD]

    def create(self, definition: ServiceDefinition) -> CreateResult:
        """Write the rendered unit and, if enabled, spawn a daemon-reload.

        The reload is fire-and-forget: the process is spawned and this method
        returns without waiting for it or looking at its exit status.

        Raises:
            FileCreateFailed: If the unit file cannot be written
            ReloadSpawnFailed: If the reload process cannot be launched
        """
        logger.debug("InstallationManager.create %s", definition.name)

        if self.auto_create_dir:
            self._create_user_dir()

        unit_path = self.unit_path(definition)
        self._write_unit(unit_path, definition.render())
        logger.debug("Service file created at %s", unit_path)
        logger.info("Service has been installed")

        reload_process = self.reload() if self.with_reload else None
        return CreateResult(unit_path=unit_path, reload=reload_process)

    def reload(self) -> subprocess.Popen:
        """Spawn ``systemctl [--user] daemon-reload`` detached, without waiting.

        Raises:
            ReloadSpawnFailed: If the process cannot be launched
        """
        logger.debug("InstallationManager.reload")
        args = self.reload_args()
        try:
            return subprocess.Popen(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.error("Couldn't reload systemd daemon")
            raise ReloadSpawnFailed(args, str(e)) from e

    def reload_and_wait(self, timeout: float | None = None) -> int:
        """Run ``systemctl [--user] daemon-reload`` and wait for it.

        Synchronous counterpart of ``reload()``.

        Returns:
            Exit status of systemctl

        Raises:
            ReloadSpawnFailed: If the process cannot be launched
            subprocess.TimeoutExpired: If ``timeout`` elapses first
        """
        logger.debug("InstallationManager.reload_and_wait")
        args = self.reload_args()
        try:
            completed = subprocess.run(args, capture_output=True, text=True, check=False, timeout=timeout)
        except OSError as e:
            logger.error("Couldn't reload systemd daemon")
            raise ReloadSpawnFailed(args, str(e)) from e
        if completed.returncode != 0:
            logger.warning("daemon-reload exited with %d: %s", completed.returncode, completed.stderr.strip())
        return completed.returncode

    def _create_user_dir(self) -> None:
        logger.debug("InstallationManager._create_user_dir %s", self.install_dir)
        try:
            self.install_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileCreateFailed(self.install_dir, self.install_dir, str(e)) from e

    def _write_unit(self, unit_path: Path, content: str) -> None:
        # A previous unit is only ever replaced by a complete one
        staging = unit_path.with_name(f".{unit_path.name}.tmp")
        staged = False
        try:
            with staging.open("w", encoding="utf-8", newline="") as handle:
                staged = True
                handle.write(content)
            os.replace(staging, unit_path)
        except OSError as e:
            if staged:
                with suppress(OSError):
                    staging.unlink()
            logger.error("Couldn't find '%s' path, are you sure it exists ?", self.install_dir)
            logger.error("Hint: You can use --install-dir to specify a custom path")
            raise FileCreateFailed(self.install_dir, unit_path, e.strerror or str(e)) from e
