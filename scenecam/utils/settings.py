# scenecam/utils/settings.py
"""
Centralized settings and constants for the camera.
"""
import logging
import os

# --- Camera defaults ---
DEFAULT_ORIGIN = (0.0, 0.0)  # scene point shown at the viewport center
DEFAULT_ZOOM = 1.0           # screen units per scene unit

# --- Zoom limits (used by clamp_zoom / wheel zoom, not enforced by Camera itself) ---
MIN_ZOOM = 0.05
MAX_ZOOM = 64.0

# Discrete zoom stops for snapping (ascending)
ZOOM_STEPS = (0.125, 0.25, 0.33, 0.5, 0.66, 0.75, 1.0, 1.25, 1.5, 2.0, 3.0, 4.0, 8.0)

# Multiplicative zoom per mouse-wheel notch (~12%)
WHEEL_ZOOM_FACTOR = 1.12

# --- Logging ---
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_LEVEL = getattr(logging, os.environ.get("SCENECAM_LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_DIR = "logs"
