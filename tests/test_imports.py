# tests/test_imports.py
"""
Smoke test: ensure every Python module under `scenecam/` imports successfully.

- We discover .py files with pathlib, then convert file paths to `scenecam.*` names.
- pygame is kept headless so no display/audio is required in CI.
"""

from __future__ import annotations

import os
import sys
import importlib
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
PKG = ROOT / "scenecam"


def _discover_modules() -> list[str]:
    """
    Find all modules beneath `scenecam/` and return fully-qualified names
    like 'scenecam.core.camera'. Includes the top-level package too.
    """
    modules: set[str] = set()
    for py in PKG.rglob("*.py"):
        if "__pycache__" in py.parts:
            continue
        parts = list(py.relative_to(PKG).with_suffix("").parts)
        if parts and parts[-1] == "__init__":
            parts = parts[:-1]
        if parts:
            modules.add(".".join(["scenecam", *parts]))
    return ["scenecam", *sorted(modules)]


def test_import_all_modules_headless() -> None:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    if str(ROOT) not in sys.path:
        sys.path.insert(0, str(ROOT))

    failures: list[tuple[str, Exception]] = []
    for mod_name in _discover_modules():
        try:
            importlib.import_module(mod_name)
        except Exception as e:  # we want full visibility on any import failure
            failures.append((mod_name, e))

    if failures:
        msgs = "\n".join(f"{m}: {type(e).__name__}({e})" for m, e in failures)
        raise AssertionError(f"Import failures:\n{msgs}")


def test_public_api_reexported() -> None:
    import scenecam

    for name in scenecam.__all__:
        assert hasattr(scenecam, name), name
