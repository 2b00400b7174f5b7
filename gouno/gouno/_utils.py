from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Iterable

logger = logging.getLogger(__name__)


def run_logged(cmd: Iterable[str]) -> None:
    """Run a command with its output going straight to the terminal.

    Raises CalledProcessError when the command exits non-zero.
    """
    cmd_list = list(cmd)
    logger.debug(f"Running: {' '.join(cmd_list)}")
    subprocess.run(cmd_list, check=True)


def missing_commands(commands: Iterable[str]) -> list[str]:
    return [name for name in commands if shutil.which(name) is None]
