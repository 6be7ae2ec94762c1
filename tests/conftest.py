import json
import subprocess
from pathlib import Path

import pytest


def _write_template(root: Path, name: str, main: str) -> Path:
    d = root / name
    (d / "src" / "components").mkdir(parents=True)
    (d / "package.json").write_text(json.dumps({"name": name, "version": "0.0.0", "scripts": {"dev": "vite"}}))
    (d / "_gitignore").write_text("node_modules\n")
    (d / "index.html").write_text("<div id=app></div>\n")
    (d / "src" / main).write_text("console.log('hi')\n")
    (d / "src" / "components" / "Hello.vue").write_bytes(b"<template>\x00hello</template>\n")
    return d


@pytest.fixture
def templates(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    root.mkdir()
    _write_template(root, "template-vue", "main.js")
    _write_template(root, "template-vue-ts", "main.ts")
    _write_template(root, "template-react", "main.jsx")
    (root / "README.md").write_text("not a template\n")
    return root


@pytest.fixture
def spawned(monkeypatch):
    """Record package manager invocations instead of running them."""
    calls = []

    def fake_run(cmd, cwd=None, check=False):
        calls.append((list(cmd), cwd))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr("autoscaffold.utils.shell.subprocess.run", fake_run)
    return calls
