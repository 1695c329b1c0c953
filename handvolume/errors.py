class HandVolumeError(Exception):
    """Базовая ошибка конвейера распознавания."""


class InvalidFormat(HandVolumeError):
    """Кадр не одноканальный 8-битный."""


class GeometryError(HandVolumeError):
    """Выпуклая оболочка или дефекты не могут быть построены для контура."""
