from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from rich import print

logger = logging.getLogger(__name__)


def sh(cmd: Sequence[str], cwd: Optional[Path] = None) -> Optional[int]:
    """Run ``cmd`` attached to the terminal and return its exit code.

    Spawn failures (missing executable, permissions) are logged and reported
    as ``None`` instead of raised.
    """
    print(f"[bold]→[/] {' '.join(cmd)}" + (f"  [dim]in {cwd}[/]" if cwd else ""))
    try:
        return subprocess.run(list(cmd), cwd=str(cwd) if cwd else None, check=False).returncode
    except OSError as e:
        logger.error("Could not run %s: %s", cmd[0], e)
        return None
