from dataclasses import dataclass
from typing import Optional
import numpy as np

from .gesture_detector import GestureResult

@dataclass
class FrameData:
    # Кадр для отображения (BGR, numpy array), с оверлеем если включён
    raw_frame: Optional[np.ndarray] = None

    # Результат распознавания; None если кадр отброшен или не прочитан
    gesture: Optional[GestureResult] = None

    # Метрики качества
    fps: float = 0.0
    latency_ms: float = 0.0

    @property
    def finger_count(self) -> int:
        return self.gesture.finger_count if self.gesture else 0

    @property
    def is_tracking(self) -> bool:
        """Захвачена ли рука системой"""
        return bool(self.gesture and self.gesture.is_tracking)
