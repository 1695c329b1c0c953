# handvolume/core/worker.py
import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from handvolume.vision.camera_service import CameraService

logger = logging.getLogger(__name__)


class CameraWorker(QObject):
    """
    Живёт в отдельном QThread: по таймеру читает кадр, гоняет распознавание
    и отдаёт FrameData в GUI сигналом.
    """
    frame_ready = Signal(object)

    def __init__(self, camera: CameraService, interval_ms: int = 16):
        super().__init__()
        self.camera = camera
        self.interval_ms = interval_ms
        self._timer = None

    @Slot()
    def start(self):
        # таймер создаётся здесь, чтобы принадлежать потоку воркера
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(self.interval_ms)
        logger.info("Camera view started.")

    @Slot()
    def stop(self):
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self.camera.release()

    def _tick(self):
        data = self.camera.get_frame_data()
        if data.raw_frame is None:
            logger.debug("Camera is not responding...")
        self.frame_ready.emit(data)
