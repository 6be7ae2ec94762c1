import logging
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

PALETTE = ("blue", "green", "yellow", "cyan")

LANGUAGES = {
    "js": "JavaScript",
    "javascript": "JavaScript",
    "ts": "TypeScript",
    "typescript": "TypeScript",
}
DEFAULT_LANGUAGE = "JavaScript"


class TemplateVariant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    display: str
    color: str


class TemplateGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    display: str
    color: str
    variants: List[TemplateVariant]


def language_label(tag: str | None) -> str:
    if not tag:
        return DEFAULT_LANGUAGE
    return LANGUAGES.get(tag.lower(), DEFAULT_LANGUAGE)


def build_catalog(root: Path, marker: str = "template") -> Dict[str, TemplateGroup]:
    """Group ``<marker>-<group>[-<lang>]`` directories under ``root``.

    Each variant's ``name`` is the identifier after the marker (``vue`` or
    ``vue-ts``), which is what the scaffolder resolves back to a directory.
    Groups keep the order in which they were first seen; entries are scanned
    in name order.
    """
    root = Path(root)
    found: Dict[str, dict] = {}

    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        prefix = f"{marker}-"
        if not entry.name.startswith(prefix) or not entry.is_dir():
            continue
        identifier = entry.name[len(prefix):]
        parts = identifier.split("-")
        if not parts[0]:
            logger.debug("Ignoring %s: no group segment", entry.name)
            continue

        group_name = parts[0]
        tag = parts[1].lower() if len(parts) > 1 else None

        group = found.get(group_name)
        if group is None:
            group = found[group_name] = {
                "name": group_name,
                "display": group_name.capitalize(),
                "color": PALETTE[len(found) % len(PALETTE)],
                "variants": [],
            }
        group["variants"].append(
            TemplateVariant(
                name=identifier,
                display=language_label(tag),
                color=group["color"],
            )
        )
        logger.debug("Found template %s in group %s", identifier, group_name)

    return {name: TemplateGroup(**data) for name, data in found.items()}
