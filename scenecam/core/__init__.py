"""Camera transform model: coordinate spaces, the Camera value, ZoomSpace and viewBox."""
__all__ = ["camera", "errors", "spaces", "viewbox", "zoom_space"]
