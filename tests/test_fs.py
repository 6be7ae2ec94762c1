from pathlib import Path

from autoscaffold.utils.fs import copy, empty_dir, is_empty


def test_is_empty(tmp_path: Path):
    assert is_empty(tmp_path)

    (tmp_path / ".git").mkdir()
    assert is_empty(tmp_path)

    (tmp_path / "License").write_text("MIT")
    assert is_empty(tmp_path)


def test_is_empty_license_only(tmp_path: Path):
    (tmp_path / "LICENSE").write_text("MIT")
    assert is_empty(tmp_path)


def test_is_not_empty(tmp_path: Path):
    (tmp_path / "README.md").write_text("hi")
    assert not is_empty(tmp_path)


def test_is_not_empty_with_extra_entry(tmp_path: Path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "LICENSE").write_text("MIT")
    (tmp_path / "README").write_text("hi")
    assert not is_empty(tmp_path)


def test_empty_dir(tmp_path: Path):
    target = tmp_path / "proj"
    (target / "a" / "b").mkdir(parents=True)
    (target / "a" / "b" / "c.txt").write_text("c")
    (target / "top.txt").write_text("t")
    (target / ".hidden").write_text("h")

    empty_dir(target)

    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_empty_dir_missing_is_noop(tmp_path: Path):
    empty_dir(tmp_path / "missing")
    assert not (tmp_path / "missing").exists()


def _tree(root: Path):
    return {p.relative_to(root).as_posix(): (p.read_bytes() if p.is_file() else None) for p in root.rglob("*")}


def test_copy_mirrors_tree(templates: Path, tmp_path: Path):
    src = templates / "template-vue-ts"
    dest = tmp_path / "out"

    copy(src, dest, rename={"_gitignore": ".gitignore"}, skip={"package.json"})

    expected = _tree(src)
    del expected["package.json"]
    expected[".gitignore"] = expected.pop("_gitignore")
    assert _tree(dest) == expected


def test_copy_skips_by_name_at_every_depth(tmp_path: Path):
    src = tmp_path / "src"
    (src / "packages" / "lib").mkdir(parents=True)
    (src / "package.json").write_text("{}")
    (src / "packages" / "lib" / "package.json").write_text("{}")

    copy(src, tmp_path / "dest", skip={"package.json"})

    assert not (tmp_path / "dest" / "package.json").exists()
    assert not (tmp_path / "dest" / "packages" / "lib" / "package.json").exists()
    assert (tmp_path / "dest" / "packages" / "lib").is_dir()


def test_copy_into_existing_dir(templates: Path, tmp_path: Path):
    dest = tmp_path / "out"
    dest.mkdir()
    (dest / ".git").mkdir()

    copy(templates / "template-react", dest)

    assert (dest / ".git").is_dir()
    assert (dest / "_gitignore").is_file()
    assert (dest / "package.json").is_file()
