# handvolume/output/level.py
import logging
import threading
from typing import Callable, List, Protocol

logger = logging.getLogger(__name__)

LevelListener = Callable[[int, int], None]


class OutputSink(Protocol):
    def set_level(self, level: int, max_level: int) -> None:
        ...


class SharedLevel:
    """
    Текущий уровень громкости - единственное общее состояние между
    распознаванием и выводом. Один писатель, много читателей.
    Слушатели (аудио, слайдер, подпись) получают ровно записанное значение.
    """

    def __init__(self, level: int = 0, max_level: int = 15):
        self._lock = threading.Lock()
        self._level = level
        self._max_level = max_level
        self._listeners: List[LevelListener] = []

    @property
    def level(self) -> int:
        with self._lock:
            return self._level

    @property
    def max_level(self) -> int:
        with self._lock:
            return self._max_level

    def snapshot(self):
        with self._lock:
            return self._level, self._max_level

    def subscribe(self, listener: LevelListener):
        self._listeners.append(listener)

    def set_level(self, level: int, max_level: int) -> None:
        with self._lock:
            changed = (level, max_level) != (self._level, self._max_level)
            self._level = level
            self._max_level = max_level
        if changed:
            logger.debug("Output level -> %d/%d", level, max_level)
        for listener in list(self._listeners):
            listener(level, max_level)
