# handvolume/vision/hull_analyzer.py
import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

import cv2
import numpy as np

from handvolume.config import ClassifierConfig
from handvolume.errors import GeometryError

logger = logging.getLogger(__name__)


class Defect(NamedTuple):
    start: int    # индекс точки контура на оболочке
    end: int      # индекс соседней точки оболочки
    far: int      # самая удалённая от оболочки точка впадины
    depth: float  # глубина в пикселях


@dataclass
class HullAnalysis:
    """Результат анализа оболочки. Ошибка возвращается, а не выбрасывается."""
    hull: Optional[np.ndarray] = None
    defects: List[Defect] = field(default_factory=list)
    error: Optional[GeometryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _failed(message: str) -> HullAnalysis:
    logger.debug("Hull analysis failed: %s", message)
    return HullAnalysis(error=GeometryError(message))


def analyze(contour: np.ndarray, config: ClassifierConfig = None) -> HullAnalysis:
    config = config or ClassifierConfig()

    try:
        hull = cv2.convexHull(contour, returnPoints=False)
    except cv2.error as e:
        return _failed(f"Failed to create Convex Hull: {e}")

    if hull is None or len(hull) < 3:
        n = 0 if hull is None else len(hull)
        return _failed(f"convex hull has {n} points, need at least 3")

    if int(hull.max()) >= len(contour) or int(hull.min()) < 0:
        return _failed("hull indices are inconsistent with contour size")

    try:
        raw = cv2.convexityDefects(contour, hull)
    except cv2.error as e:
        return _failed(f"Convexity Defects error: {e}")

    defects = []
    if raw is not None:
        for s, e, f, d in raw.reshape(-1, 4):
            # OpenCV отдаёт глубину в фиксированной точке (8 дробных бит)
            depth = float(d) / 256.0
            if depth <= config.min_defect_depth:
                continue
            defects.append(Defect(int(s), int(e), int(f), depth))

    return HullAnalysis(hull=hull, defects=defects)
