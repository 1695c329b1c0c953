"""Управление громкостью количеством поднятых пальцев (OpenCV + PySide6)."""

__version__ = "0.1.0"
