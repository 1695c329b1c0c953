# handvolume/vision/camera_service.py
import logging
import time

from .frame_data import FrameData
from .metrics import MetricsCollector
from .overlay import draw_overlay

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class CameraService:
    """
    Источник кадров: читает камеру, переводит в серый и отдаёт кадр
    в обработчик on_frame (цикл управления). Возвращает FrameData для UI.
    """

    def __init__(self, on_frame, camera_index: int = 0, resolution: tuple = (640, 480),
                 mirror: bool = True, show_overlay: bool = True):
        self.cap = cv2.VideoCapture(camera_index)
        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {camera_index}")

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, resolution[0])
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, resolution[1])
        logger.info("Camera %d initialized successfully.", camera_index)

        self.on_frame = on_frame
        self.metrics = MetricsCollector()

        # Состояние
        self.last_frame_time = 0
        self.frame_count = 0

        self.mirror = mirror
        self.show_overlay = show_overlay

    def get_frame_data(self) -> FrameData:
        """
        Главный метод — возвращает данные текущего кадра.
        Другие модули используют ТОЛЬКО этот метод.
        """
        frame_data = FrameData()

        # Измеряем задержку
        current_time = time.perf_counter()
        frame_data.latency_ms = (current_time - self.last_frame_time) * 1000
        self.last_frame_time = current_time

        # Получаем кадр
        ret, frame = self.cap.read()
        if not ret:
            frame_data.raw_frame = None
            return frame_data

        if self.mirror:
            frame = cv2.flip(frame, 1)
        self.frame_count += 1

        gray = to_gray(frame)
        frame_data.gesture = self.on_frame(gray)

        if self.show_overlay and frame_data.gesture is not None:
            draw_overlay(frame, frame_data.gesture)
        frame_data.raw_frame = frame

        frame_data.fps = self.metrics.update()
        return frame_data

    def release(self):
        if self.cap.isOpened():
            self.cap.release()
            logger.info("Camera view stopped.")

    def __del__(self):
        self.release()


def to_gray(frame: np.ndarray) -> np.ndarray:
    """BGR -> серый. Одноканальные кадры возвращаются как есть."""
    if frame.ndim == 3 and frame.shape[2] == 3:
        return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    if frame.ndim == 3 and frame.shape[2] == 4:
        return cv2.cvtColor(frame, cv2.COLOR_BGRA2GRAY)
    # остальное отдаём как есть, формат проверит препроцессор
    return frame
