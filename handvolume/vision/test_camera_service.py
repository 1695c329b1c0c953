# test_camera_service.py

import unittest
from unittest.mock import MagicMock, patch

import numpy as np

from handvolume.vision.camera_service import CameraService, to_gray
from handvolume.vision.frame_data import FrameData
from handvolume.vision.gesture_detector import GestureResult
from handvolume.vision.metrics import MetricsCollector


def bgr_frame(h=48, w=64):
    frame = np.full((h, w, 3), 255, dtype=np.uint8)
    frame[:, : w // 4] = 0   # тёмная полоса слева
    return frame


class TestCameraService(unittest.TestCase):

    def setUp(self):
        patcher = patch("handvolume.vision.camera_service.cv2.VideoCapture")
        self.capture_cls = patcher.start()
        self.addCleanup(patcher.stop)

        self.cap = self.capture_cls.return_value
        self.cap.isOpened.return_value = True
        self.cap.read.return_value = (True, bgr_frame())

        self.on_frame = MagicMock(return_value=GestureResult(finger_count=3, level=9))

    def test_camera_not_opened(self):
        self.cap.isOpened.return_value = False
        with self.assertRaises(RuntimeError):
            CameraService(self.on_frame, camera_index=2)

    def test_frame_is_passed_as_gray(self):
        camera = CameraService(self.on_frame, mirror=False, show_overlay=False)
        data = camera.get_frame_data()

        self.assertIsInstance(data, FrameData)
        gray = self.on_frame.call_args[0][0]
        self.assertEqual(gray.ndim, 2)
        self.assertEqual(gray.dtype, np.uint8)
        self.assertEqual(gray[0, 0], 0)
        self.assertEqual(data.finger_count, 3)
        self.assertEqual(data.raw_frame.shape, (48, 64, 3))

    def test_mirror_flips_frame(self):
        camera = CameraService(self.on_frame, mirror=True, show_overlay=False)
        camera.get_frame_data()
        gray = self.on_frame.call_args[0][0]
        self.assertEqual(gray[0, 0], 255)
        self.assertEqual(gray[0, -1], 0)

    def test_failed_read_returns_empty_frame_data(self):
        self.cap.read.return_value = (False, None)
        camera = CameraService(self.on_frame)
        data = camera.get_frame_data()
        self.assertIsNone(data.raw_frame)
        self.assertIsNone(data.gesture)
        self.assertFalse(data.is_tracking)
        self.on_frame.assert_not_called()

    def test_dropped_frame_keeps_preview(self):
        self.on_frame.return_value = None
        camera = CameraService(self.on_frame)
        data = camera.get_frame_data()
        self.assertIsNotNone(data.raw_frame)
        self.assertIsNone(data.gesture)
        self.assertEqual(data.finger_count, 0)

    def test_release(self):
        camera = CameraService(self.on_frame)
        camera.release()
        self.cap.release.assert_called()


class TestToGray(unittest.TestCase):

    def test_conversions(self):
        self.assertEqual(to_gray(bgr_frame()).ndim, 2)
        self.assertEqual(to_gray(np.zeros((4, 4, 4), dtype=np.uint8)).ndim, 2)
        gray = np.zeros((4, 4), dtype=np.uint8)
        self.assertIs(to_gray(gray), gray)
        # двухканальный кадр не трогаем, его отбракует препроцессор
        self.assertEqual(to_gray(np.zeros((4, 4, 2), dtype=np.uint8)).shape, (4, 4, 2))


class TestMetricsCollector(unittest.TestCase):

    def test_fps(self):
        ticks = iter([0.0, 0.1, 0.2, 0.3])
        metrics = MetricsCollector(clock=lambda: next(ticks))
        self.assertEqual(metrics.update(), 0.0)
        metrics.update()
        metrics.update()
        self.assertAlmostEqual(metrics.update(), 10.0)

    def test_window_is_bounded(self):
        ticks = iter(float(i) for i in range(100))
        metrics = MetricsCollector(window=5, clock=lambda: next(ticks))
        for _ in range(20):
            fps = metrics.update()
        self.assertEqual(len(metrics.frame_times), 5)
        self.assertAlmostEqual(fps, 1.0)


if __name__ == "__main__":
    unittest.main()
