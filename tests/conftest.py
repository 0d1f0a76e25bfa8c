"""Shared fixtures: a throwaway project tree with public/config roots and a Vite build manifest."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import pytest

from vite_assets import StaticHost, Vite, reset_instance

MANIFEST: Dict[str, Any] = {
    "index.js": {
        "file": "assets/index.9be0d1.js",
        "src": "index.js",
        "isEntry": True,
        "css": ["assets/index.3fa1c2.css"],
        "imports": ["_vendor.11aa22.js"],
    },
    "_vendor.11aa22.js": {"file": "assets/vendor.11aa22.js"},
    "src/views/Home.vue": {
        "file": "assets/Home.e701bdef.js",
        "src": "src/views/Home.vue",
        "isDynamicEntry": True,
    },
    "admin.js": {
        "file": "assets/admin.44cc55.js",
        "src": "admin.js",
        "isEntry": True,
        "css": ["assets/admin.1a.css", "assets/admin.2b.css"],
        "imports": ["_vendor.11aa22.js", "_missing.js"],
    },
    "plain.js": {"file": "assets/plain.77dd88.js", "src": "plain.js", "isEntry": True},
}


@pytest.fixture(autouse=True)
def _reset_vite_instance():
    reset_instance()
    yield
    reset_instance()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "public").mkdir()
    (tmp_path / "config").mkdir()
    return tmp_path


@pytest.fixture
def write_manifest(project: Path) -> Callable[..., Path]:
    def _write(data: Any = MANIFEST, out_dir: str = "dist", raw: Optional[str] = None) -> Path:
        path = project / "public" / out_dir / "manifest.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(raw if raw is not None else json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_host(project: Path) -> Callable[..., StaticHost]:
    def _make(
        options: Optional[Mapping[str, Any]] = None,
        environ: Optional[Dict[str, str]] = None,
        language_code: Optional[str] = None,
    ) -> StaticHost:
        return StaticHost(
            roots={
                "base": str(project),
                "index": str(project / "public"),
                "config": str(project / "config"),
            },
            options=options,
            language_code=language_code,
            environ=environ if environ is not None else {},
        )

    return _make


@pytest.fixture
def make_vite(make_host: Callable[..., StaticHost]) -> Callable[..., Vite]:
    def _make(
        options: Optional[Mapping[str, Any]] = None,
        environ: Optional[Dict[str, str]] = None,
        language_code: Optional[str] = None,
    ) -> Vite:
        return Vite(make_host(options=options, environ=environ, language_code=language_code))

    return _make


@pytest.fixture
def dev_lock(project: Path) -> Path:
    lock = project / "src" / ".lock"
    lock.parent.mkdir()
    lock.touch()
    return lock
