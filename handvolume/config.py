import math
from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class ClassifierConfig:
    """Константы классификатора. Пороги фиксированные, не подстраиваются под кадр."""
    blur_kernel: int = 5            # размер ядра GaussianBlur (нечётный)
    threshold_cut: int = 60         # всё темнее считается рукой
    threshold_max: int = 255
    min_contour_area: float = 100.0 # отсекаем шум
    min_contour_points: int = 3
    min_defect_depth: float = 2.0   # в пикселях, мельче - ступеньки растра
    max_angle: float = math.pi / 2  # угол впадины между пальцами строго меньше
    max_fingers: int = 5

    def validate(self) -> "ClassifierConfig":
        if self.blur_kernel <= 0 or self.blur_kernel % 2 == 0:
            raise ValueError(f"blur_kernel must be a positive odd number, got {self.blur_kernel}")
        if not 0 <= self.threshold_cut <= 255:
            raise ValueError(f"threshold_cut must be in [0, 255], got {self.threshold_cut}")
        if self.min_contour_area < 0:
            raise ValueError("min_contour_area must be non-negative")
        if self.min_contour_points < 3:
            raise ValueError("min_contour_points must be at least 3")
        if self.min_defect_depth < 0:
            raise ValueError("min_defect_depth must be non-negative")
        if not 0 < self.max_angle <= math.pi:
            raise ValueError("max_angle must be in (0, pi]")
        if self.max_fingers < 0:
            raise ValueError("max_fingers must be non-negative")
        return self


@dataclass
class AppConfig:
    camera_index: int = 0
    resolution: Tuple[int, int] = (640, 480)
    mirror: bool = True
    max_level: int = 15             # как STREAM_MUSIC на большинстве устройств
    frame_interval_ms: int = 16
    show_overlay: bool = True
    log_level: str = "INFO"
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)

    def validate(self) -> "AppConfig":
        if self.max_level < 0:
            raise ValueError(f"max_level must be non-negative, got {self.max_level}")
        if self.resolution[0] <= 0 or self.resolution[1] <= 0:
            raise ValueError(f"invalid resolution {self.resolution}")
        if self.frame_interval_ms < 0:
            raise ValueError("frame_interval_ms must be non-negative")
        self.classifier.validate()
        return self
