"""Result of InstallationManager.create()."""

import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CreateResult:
    """Where the unit was written and the (unobserved) reload process, if any."""

    unit_path: Path
    reload: subprocess.Popen | None = None
