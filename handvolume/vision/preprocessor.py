# handvolume/vision/preprocessor.py
import cv2
import numpy as np

from handvolume.config import ClassifierConfig
from handvolume.errors import InvalidFormat


def check_frame(frame) -> None:
    """Кадр должен быть непустым одноканальным uint8 (аналог CV_8UC1): (H, W) или (H, W, 1)."""
    if not isinstance(frame, np.ndarray):
        raise InvalidFormat(f"expected numpy array, got {type(frame).__name__}")
    if frame.size == 0:
        raise InvalidFormat("frame is empty")
    single_channel = frame.ndim == 2 or (frame.ndim == 3 and frame.shape[2] == 1)
    if not single_channel:
        raise InvalidFormat(f"expected single-channel frame, got shape {frame.shape}")
    if frame.dtype != np.uint8:
        raise InvalidFormat(f"expected uint8 frame, got {frame.dtype}")


def preprocess(frame: np.ndarray, config: ClassifierConfig = None) -> np.ndarray:
    """
    Сглаживание и бинаризация серого кадра.
    Тёмные области (рука на светлом фоне) становятся передним планом (255).
    Входной кадр не изменяется.
    """
    config = config or ClassifierConfig()
    check_frame(frame)
    if frame.ndim == 3:
        frame = frame[:, :, 0]

    k = config.blur_kernel
    blurred = cv2.GaussianBlur(frame, (k, k), 0)
    _, mask = cv2.threshold(
        blurred, config.threshold_cut, config.threshold_max, cv2.THRESH_BINARY_INV
    )
    return mask
