# handvolume/vision/finger_counter.py
import math
from typing import List, Sequence

import numpy as np

from handvolume.config import ClassifierConfig
from .hull_analyzer import Defect


def _point(contour: np.ndarray, idx: int):
    x, y = contour[idx].reshape(-1)[:2]
    return float(x), float(y)


def _dist(p1, p2) -> float:
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def defect_angle(start, end, far) -> float:
    """
    Угол треугольника (start, end, far) при вершине far по теореме косинусов.
    Для вырожденного треугольника (b или c равны нулю) возвращает NaN.
    """
    a = _dist(start, end)
    b = _dist(start, far)
    c = _dist(end, far)
    if b == 0 or c == 0:
        return float("nan")

    cos_angle = (b * b + c * c - a * a) / (2 * b * c)
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.acos(cos_angle)


def accepted_defects(contour: np.ndarray, defects: Sequence[Defect],
                     config: ClassifierConfig = None) -> List[Defect]:
    """Дефекты, похожие на впадину между двумя пальцами (острый угол)."""
    config = config or ClassifierConfig()
    accepted = []
    for defect in defects:
        angle = defect_angle(
            _point(contour, defect.start),
            _point(contour, defect.end),
            _point(contour, defect.far),
        )
        # NaN < x всегда False, вырожденные дефекты не считаются
        if angle < config.max_angle:
            accepted.append(defect)
    return accepted


def count_fingers(contour: np.ndarray, defects: Sequence[Defect],
                  config: ClassifierConfig = None) -> int:
    config = config or ClassifierConfig()
    count = len(accepted_defects(contour, defects, config))
    # больше пяти - это шум контура, а не лишние пальцы
    return min(count, config.max_fingers)
