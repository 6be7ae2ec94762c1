"""Settings for autoscaffold.

Values come from a YAML file validated into :class:`Settings`. The file is
looked up in this order: an explicit path, ``$AUTOSCAFFOLD_CONFIG``, then
``config/autoscaffold.yml`` in the working directory. Without any file the
defaults below apply.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ScaffoldError

logger = logging.getLogger(__name__)

CONFIG_FILE = Path("config/autoscaffold.yml")
CONFIG_ENV = "AUTOSCAFFOLD_CONFIG"
TEMPLATES_ROOT = Path(__file__).resolve().parent / "templates"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    templates_dir: Path = TEMPLATES_ROOT
    template_marker: str = "template"
    default_project: str = "default_project"
    package_managers: List[str] = Field(default_factory=lambda: ["npm", "yarn", "pnpm"], min_length=1)
    install_args: List[str] = Field(default_factory=lambda: ["install"])
    dev_args: List[str] = Field(default_factory=lambda: ["run", "dev"])
    manifest: str = "package.json"
    rename_files: Dict[str, str] = Field(default_factory=lambda: {"_gitignore": ".gitignore"})


def find_config(path: Optional[Path] = None) -> Optional[Path]:
    if path is not None:
        return Path(path)
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return CONFIG_FILE if CONFIG_FILE.exists() else None


def load_settings(path: Optional[Path] = None, **overrides) -> Settings:
    """Load settings, applying any non-``None`` keyword overrides on top."""
    cfg_path = find_config(path)
    data = {}
    if cfg_path is not None:
        if not cfg_path.is_file():
            raise ScaffoldError(f"Config file not found: {cfg_path}")
        logger.debug("Loading config from %s", cfg_path)
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ScaffoldError(f"Config file {cfg_path} must contain a mapping")
        # Relative template roots are taken relative to the config file.
        if data.get("templates_dir"):
            data["templates_dir"] = cfg_path.parent / Path(data["templates_dir"]).expanduser()

    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ScaffoldError(f"Invalid configuration: {e}") from e
