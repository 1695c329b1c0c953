import logging

from PySide6.QtCore import QMetaObject, QThread, Qt
from PySide6.QtWidgets import QApplication

from handvolume.config import AppConfig
from handvolume.core.frame_loop import FrameControlLoop
from handvolume.core.worker import CameraWorker
from handvolume.output.level import SharedLevel
from handvolume.output.mapper import GestureOutputMapper
from handvolume.output.qt_sink import QtLevelSink, connect_level
from handvolume.ui.ui import MainWindow
from handvolume.vision.camera_service import CameraService
from handvolume.vision.gesture_detector import GestureDetector

logger = logging.getLogger(__name__)


class AppCore:
    def __init__(self, sys_argv, config: AppConfig = None):
        self.config = (config or AppConfig()).validate()
        self.app = QApplication(sys_argv)
        self.app.setStyle("Fusion")

        self.shared_level = SharedLevel(0, self.config.max_level)
        self.window = MainWindow(self.shared_level)

        # Уровень из потока камеры попадает в SharedLevel только через GUI-поток
        self.level_sink = QtLevelSink()
        self.level_receiver = connect_level(self.level_sink, self.shared_level)

        self.loop = FrameControlLoop(
            GestureDetector(self.config.classifier),
            GestureOutputMapper(self.level_sink, self.config.max_level),
        )

        self.thread = None
        self.worker = None
        try:
            self.camera = CameraService(
                self.loop.on_frame,
                camera_index=self.config.camera_index,
                resolution=self.config.resolution,
                mirror=self.config.mirror,
                show_overlay=self.config.show_overlay,
            )
            self.camera_available = True
        except RuntimeError as e:
            logger.error("Camera error: %s. Running in manual-only mode.", e)
            self.camera = None
            self.camera_available = False
            self.window.show_status("Камера недоступна, громкость можно менять слайдером")

        self.window.show()

        if self.camera_available:
            self._start_worker()
        self.app.aboutToQuit.connect(self._shutdown)

    def run(self):
        return self.app.exec()

    def _start_worker(self):
        self.thread = QThread()
        self.worker = CameraWorker(self.camera, self.config.frame_interval_ms)
        self.worker.moveToThread(self.thread)
        self.thread.started.connect(self.worker.start)
        # слот окна живёт в GUI-потоке, сигнал придёт через очередь
        self.worker.frame_ready.connect(self.window.show_frame_data)
        self.thread.start()

    def _shutdown(self):
        if self.thread is None:
            return
        QMetaObject.invokeMethod(self.worker, "stop", Qt.BlockingQueuedConnection)
        self.thread.quit()
        self.thread.wait()
        self.thread = None

