from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from rich import print

from ..config import Settings
from ..utils import fs
from ..utils.shell import sh
from .prompts import ScaffoldAnswers

logger = logging.getLogger(__name__)


class Scaffolder:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.templates_root = Path(self.settings.templates_dir)

    def template_dir(self, template_id: str) -> Path:
        src_root = self.templates_root / f"{self.settings.template_marker}-{template_id}"
        if not src_root.is_dir():
            raise FileNotFoundError(f"Template '{template_id}' not found at {src_root}")
        return src_root

    def prepare_target(self, root: Path, overwrite: Optional[bool]) -> None:
        if overwrite:
            logger.debug("Emptying %s", root)
            fs.empty_dir(root)
        elif not root.exists():
            root.mkdir(parents=True)

    def write_manifest(self, src_root: Path, root: Path, package_name: str) -> Dict[str, Any]:
        manifest = self.settings.manifest
        pkg = json.loads((src_root / manifest).read_text(encoding="utf-8"))
        pkg["name"] = package_name
        (root / manifest).write_text(json.dumps(pkg, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return pkg

    def scaffold(self, answers: ScaffoldAnswers, cwd: Optional[Path] = None) -> Path:
        """Create the project described by ``answers`` and return its root.

        Nothing is rolled back if copying fails halfway.
        """
        root = (Path(cwd) if cwd is not None else Path.cwd()).joinpath(answers.target_dir).resolve()
        src_root = self.template_dir(answers.template_id)

        self.prepare_target(root, answers.overwrite)
        print(f"\nScaffolding project in [cyan]{root}[/]...")

        fs.copy(
            src_root,
            root,
            rename=self.settings.rename_files,
            skip={self.settings.manifest},
        )
        self.write_manifest(src_root, root, answers.resolved_package_name)
        return root

    def install(self, root: Path, package_manager: str) -> bool:
        """Run the install step, then the dev script if install succeeded."""
        code = sh([package_manager, *self.settings.install_args], cwd=root)
        if code != 0:
            if code is not None:
                logger.warning("%s install exited with status %s; not starting the dev server", package_manager, code)
            return False
        code = sh([package_manager, *self.settings.dev_args], cwd=root)
        if code not in (0, None):
            logger.warning("%s %s exited with status %s", package_manager, " ".join(self.settings.dev_args), code)
        return code == 0

    def next_steps(self, target_dir: str, package_manager: str) -> None:
        print("\n[bold]Done.[/] Now run:\n")
        if target_dir != ".":
            print(f"  [green]cd {target_dir}[/]")
        print(f"  [green]{package_manager} {' '.join(self.settings.install_args)}[/]")
        print(f"  [green]{package_manager} {' '.join(self.settings.dev_args)}[/]")
