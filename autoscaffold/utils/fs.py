import os
import shutil
from pathlib import Path
from typing import Iterable, Mapping, Optional


def is_empty(path) -> bool:
    files = os.listdir(path)
    return len(files) == 0 or (
        len(files) <= 2 and all(f == ".git" or f.upper() == "LICENSE" for f in files)
    )


def empty_dir(path) -> None:
    """Remove everything inside ``path`` but keep the directory itself."""
    path = Path(path)
    if not path.exists():
        return
    for entry in path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink(missing_ok=True)


def copy(
    src,
    dest,
    rename: Optional[Mapping[str, str]] = None,
    skip: Iterable[str] = (),
) -> None:
    """Mirror ``src`` into ``dest``.

    ``rename`` maps single path segments (``_gitignore`` -> ``.gitignore``).
    Files whose name is in ``skip`` are left out at every depth.
    """
    src_root, dest = Path(src), Path(dest)
    rename = rename or {}
    skip = set(skip)

    if not src_root.is_dir():
        raise FileNotFoundError(f"Template directory not found: {src_root}")
    dest.mkdir(parents=True, exist_ok=True)

    for src_path in sorted(src_root.rglob("*")):
        rel = src_path.relative_to(src_root)
        dst_path = dest.joinpath(*(rename.get(part, part) for part in rel.parts))

        if src_path.is_dir():
            dst_path.mkdir(parents=True, exist_ok=True)
            continue
        if src_path.name in skip:
            continue

        dst_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy(src_path, dst_path)
