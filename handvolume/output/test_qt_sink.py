import threading
import unittest

from PySide6.QtCore import QCoreApplication

from handvolume.output.level import SharedLevel
from handvolume.output.qt_sink import QtLevelSink, connect_level


class TestQtLevelSink(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def test_level_reaches_shared_state(self):
        shared = SharedLevel(0, 15)
        sink = QtLevelSink()
        receiver = connect_level(sink, shared)

        posted = []
        sink.level_posted.connect(lambda level, max_level: posted.append(level))
        # тот же поток - прямое соединение, очередь не нужна
        sink.set_level(12, 15)

        self.assertEqual(posted, [12])
        self.assertEqual(shared.snapshot(), (12, 15))
        self.assertIsNotNone(receiver)

    def test_level_from_camera_thread_is_queued(self):
        shared = SharedLevel(0, 15)
        sink = QtLevelSink()
        receiver = connect_level(sink, shared)

        written_in = []
        shared.subscribe(lambda level, max_level: written_in.append(threading.get_ident()))

        camera = threading.Thread(target=sink.set_level, args=(9, 15))
        camera.start()
        camera.join(timeout=5)
        # поток камеры не ждёт GUI-поток
        self.assertFalse(camera.is_alive())
        self.assertEqual(shared.snapshot(), (0, 15))
        self.assertEqual(written_in, [])

        QCoreApplication.processEvents()

        self.assertEqual(shared.snapshot(), (9, 15))
        self.assertEqual(written_in, [threading.get_ident()])
        self.assertIsNotNone(receiver)


if __name__ == "__main__":
    unittest.main()
