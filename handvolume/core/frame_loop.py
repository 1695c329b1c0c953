# handvolume/core/frame_loop.py
import logging
import threading
from enum import Enum
from typing import Callable, Optional

import numpy as np

from handvolume.output.mapper import GestureOutputMapper
from handvolume.vision.gesture_detector import GestureDetector, GestureResult

logger = logging.getLogger(__name__)


class LoopState(Enum):
    IDLE = "idle"
    PREPROCESSING = "preprocessing"
    SELECTING = "selecting"
    ANALYZING = "analyzing"
    COUNTING = "counting"
    MAPPING = "mapping"


class FrameControlLoop:
    """
    Один цикл на каждый доставленный кадр. Любая неудача распознавания
    приводит к 0 пальцев, но уровень всё равно записывается.
    Если предыдущий цикл ещё идёт, кадр отбрасывается без ожидания.
    """

    def __init__(self, detector: GestureDetector, mapper: GestureOutputMapper,
                 on_state: Optional[Callable[[LoopState], None]] = None):
        self.detector = detector
        self.mapper = mapper
        self.on_state = on_state
        self.state = LoopState.IDLE
        self.frames_dropped = 0
        self._busy = threading.Lock()
        self._stats_lock = threading.Lock()

    def on_frame(self, frame: np.ndarray) -> Optional[GestureResult]:
        if not self._busy.acquire(blocking=False):
            with self._stats_lock:
                self.frames_dropped += 1
            logger.debug("Classification in progress, frame dropped")
            return None
        try:
            result = self.detector.detect(frame, on_stage=self._enter_stage)
            self._enter(LoopState.MAPPING)
            result.level = self.mapper.apply(result.finger_count)
            return result
        finally:
            self._enter(LoopState.IDLE)
            self._busy.release()

    def _enter_stage(self, name: str):
        self._enter(LoopState(name))

    def _enter(self, state: LoopState):
        self.state = state
        if self.on_state is not None:
            self.on_state(state)
