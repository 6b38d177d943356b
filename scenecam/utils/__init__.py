"""
Utilities package marker.

Settings, logging setup and helpers layered on top of scenecam.core.
"""
__all__ = ["camera_types", "camera_utils", "logging_setup", "settings"]
