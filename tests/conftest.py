# tests/conftest.py
from __future__ import annotations
import os
import sys
from pathlib import Path

# Ensure repo root is importable as a package root (so `import scenecam...` works on CI)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame: only math/Rect types are used, but keep SDL quiet regardless
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
