import time
from collections import deque

class MetricsCollector:
    def __init__(self, window: int = 30, clock=time.perf_counter):
        # ~1 сек при 30 FPS
        self.frame_times = deque(maxlen=window)
        self._clock = clock

    def update(self):
        """Вызывается каждый кадр. Возвращает текущий FPS."""
        self.frame_times.append(self._clock())

        if len(self.frame_times) < 2:
            return 0.0

        # FPS = (число кадров - 1) / (время между первым и последним)
        elapsed = self.frame_times[-1] - self.frame_times[0]
        if elapsed <= 0:
            return 0.0
        return (len(self.frame_times) - 1) / elapsed
