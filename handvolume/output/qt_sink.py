# handvolume/output/qt_sink.py
from PySide6.QtCore import QObject, Signal, Slot

from .level import SharedLevel


class QtLevelSink(QObject):
    """
    Приёмник уровня для потока камеры. Только испускает сигнал:
    запись и отображение происходят в GUI-потоке, поток камеры не ждёт.
    """
    level_posted = Signal(int, int)

    def set_level(self, level: int, max_level: int) -> None:
        self.level_posted.emit(level, max_level)


class LevelReceiver(QObject):
    """Создаётся в GUI-потоке; из другого потока сигнал придёт через очередь."""

    def __init__(self, shared: SharedLevel, parent=None):
        super().__init__(parent)
        self._shared = shared

    @Slot(int, int)
    def apply(self, level: int, max_level: int):
        self._shared.set_level(level, max_level)


def connect_level(sink: QtLevelSink, shared: SharedLevel, parent=None) -> LevelReceiver:
    receiver = LevelReceiver(shared, parent)
    sink.level_posted.connect(receiver.apply)
    return receiver
