# handvolume/output/mapper.py
from .level import OutputSink

MAX_FINGERS = 5


def map_to_level(finger_count: int, max_level: int) -> int:
    """Линейно: 0 пальцев -> 0, 5 пальцев -> max_level, шесть полос."""
    if max_level < 0:
        raise ValueError(f"max_level must be non-negative, got {max_level}")
    fingers = max(0, min(MAX_FINGERS, int(finger_count)))
    return max_level * fingers // MAX_FINGERS


class GestureOutputMapper:
    def __init__(self, sink: OutputSink, max_level: int):
        if max_level < 0:
            raise ValueError(f"max_level must be non-negative, got {max_level}")
        self.sink = sink
        self.max_level = max_level

    def apply(self, finger_count: int) -> int:
        level = map_to_level(finger_count, self.max_level)
        self.sink.set_level(level, self.max_level)
        return level
