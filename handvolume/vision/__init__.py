from .camera_service import CameraService
from .gesture_detector import GestureDetector, GestureResult

__all__ = ["CameraService", "GestureDetector", "GestureResult"]
