import cv2
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QFrame, QSizePolicy, QStatusBar, QSlider
)

from handvolume.output.level import SharedLevel
from handvolume.vision.frame_data import FrameData

# --- ПРЕВЬЮ КАМЕРЫ ---
class CameraPreview(QLabel):
    def __init__(self, parent=None):
        super().__init__("Камера недоступна", parent)
        self.setAlignment(Qt.AlignCenter)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(320, 240)
        self.setStyleSheet("background: #1E272E; color: #95A5A6; border-radius: 16px; font-size: 16px;")

    def set_frame(self, image: QImage):
        pixmap = QPixmap.fromImage(image)
        self.setPixmap(pixmap.scaled(self.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation))

# --- КОМПОНЕНТЫ UI ---
class FingerHintWidget(QLabel):
    def __init__(self):
        super().__init__("Ожидание руки...")
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet("background: #2C3E50; color: #ECF0F1; padding: 10px 20px; border-radius: 10px; font-weight: 600;")
        self.setFixedHeight(40)

    def update_hint(self, finger_count: int, is_tracking: bool):
        if not is_tracking:
            self.setText("👀 Поиск руки...")
            self.setStyleSheet("background: #2C3E50; color: #ECF0F1; padding: 10px 20px; border-radius: 10px;")
            return

        self.setText(f"🖐 Пальцев: {finger_count}")
        if finger_count == 0:
            self.setStyleSheet("background: #E67E22; color: white; padding: 10px 20px; border-radius: 10px; font-weight: bold;")
        else:
            self.setStyleSheet("background: #27AE60; color: white; padding: 10px 20px; border-radius: 10px; font-weight: bold;")


class VolumeWidget(QWidget):
    """
    Слайдер и подпись громкости. Показывает только то, что записано в SharedLevel;
    перетаскивание слайдера тоже пишет туда же.
    """

    def __init__(self, shared: SharedLevel, color: str = "#2980B9", parent=None):
        super().__init__(parent)
        self._shared = shared
        self._syncing = False

        container = QVBoxLayout(self)
        container.setSpacing(2)
        container.setAlignment(Qt.AlignCenter)

        title = QLabel("ГРОМКОСТЬ")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"border: none; font-size: 11px; font-weight: bold; color: {color}; letter-spacing: 1px;")

        self.value_label = QLabel()
        self.value_label.setAlignment(Qt.AlignCenter)
        self.value_label.setStyleSheet("border: none; font-size: 16px; font-weight: 800; color: #2C3E50;")

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setFixedWidth(240)
        self.slider.setStyleSheet(f"""
            QSlider::groove:horizontal {{
                border: none;
                background: #E0E0E0;
                height: 6px;
                border-radius: 3px;
            }}
            QSlider::sub-page:horizontal {{
                background: {color};
                border-radius: 3px;
            }}
            QSlider::handle:horizontal {{
                background: white;
                border: 2px solid {color};
                width: 16px;
                height: 16px;
                margin: -5px 0;
                border-radius: 8px;
            }}
        """)
        self.slider.valueChanged.connect(self._on_slider_changed)

        container.addWidget(title)
        container.addWidget(self.value_label)
        container.addWidget(self.slider)

        level, max_level = shared.snapshot()
        self.show_level(level, max_level)
        shared.subscribe(self.show_level)

    def show_level(self, level: int, max_level: int):
        self._syncing = True
        try:
            self.slider.setRange(0, max_level)
            self.slider.setValue(level)
        finally:
            self._syncing = False
        self.value_label.setText(f"Volume: {level}")

    def _on_slider_changed(self, value: int):
        # изменения от распознавания приходят через show_level, их не отражаем обратно
        if self._syncing:
            return
        self._shared.set_level(value, self._shared.max_level)

# --- MAIN WINDOW ---
class MainWindow(QMainWindow):
    def __init__(self, shared: SharedLevel):
        super().__init__()
        self._shared = shared
        self._init_ui()

    def _init_ui(self):
        self.setWindowTitle("Hand Volume")
        self.resize(900, 700)
        self.setStyleSheet("QMainWindow { background-color: #E9EEF3; }")

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        self.preview = CameraPreview()
        main_layout.addWidget(self.preview, stretch=1)

        self._create_bottom_bar(main_layout)

    def _create_bottom_bar(self, layout):
        frame = QFrame()
        frame.setFixedHeight(100)
        frame.setStyleSheet("background: #FFFFFF; border: 1px solid #BDC3C7; border-radius: 16px;")
        l = QHBoxLayout(frame)
        l.setSpacing(30)
        l.setContentsMargins(30, 5, 30, 5)

        self.finger_hint = FingerHintWidget()
        self.finger_hint.setFixedWidth(260)
        l.addWidget(self.finger_hint)

        sep = QFrame()
        sep.setFrameShape(QFrame.VLine)
        sep.setStyleSheet("color: #ECF0F1;")
        l.addWidget(sep)

        l.addStretch()
        self.volume_widget = VolumeWidget(self._shared)
        l.addWidget(self.volume_widget)
        l.addStretch()

        layout.addWidget(frame)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def set_camera_frame(self, image: QImage):
        self.preview.set_frame(image)

    def update_finger_hint(self, finger_count: int, is_tracking: bool):
        self.finger_hint.update_hint(finger_count, is_tracking)

    def show_status(self, text: str, timeout: int = 0):
        self.status_bar.showMessage(text, timeout)

    @Slot(object)
    def show_frame_data(self, data: FrameData):
        # --- ОТРИСОВКА КАДРА ---
        if data.raw_frame is not None:
            rgb_frame = cv2.cvtColor(data.raw_frame, cv2.COLOR_BGR2RGB)
            h, w, ch = rgb_frame.shape
            qt_image = QImage(rgb_frame.data, w, h, ch * w, QImage.Format_RGB888)
            self.set_camera_frame(qt_image.copy())

        # Отброшенный кадр не меняет подсказку
        if data.gesture is None:
            return

        self.update_finger_hint(data.finger_count, data.is_tracking)
        self.show_status(f"FPS: {data.fps:.1f} | Latency: {data.latency_ms:.1f} ms")
