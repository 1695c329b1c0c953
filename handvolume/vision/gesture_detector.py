import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import numpy as np

from handvolume.config import ClassifierConfig
from handvolume.errors import InvalidFormat
from .contour_selector import select_contour
from .finger_counter import accepted_defects, count_fingers
from .hull_analyzer import Defect, analyze
from .preprocessor import preprocess

logger = logging.getLogger(__name__)

# Причины, по которым кадр дал 0 пальцев
INVALID_FORMAT = "invalid_format"
NO_CONTOUR = "no_contour"
GEOMETRY = "geometry"


@dataclass
class GestureResult:
    finger_count: int = 0
    level: int = 0
    failure: Optional[str] = None

    # Диагностика для оверлея
    contour: Optional[np.ndarray] = None
    hull: Optional[np.ndarray] = None
    defects: List[Defect] = field(default_factory=list)
    finger_gaps: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def is_tracking(self) -> bool:
        return self.contour is not None


class GestureDetector:
    """
    Подсчёт пальцев на одном сером кадре:
    сглаживание -> порог -> самый большой контур -> оболочка/дефекты -> углы.
    Без состояния между кадрами: один и тот же кадр всегда даёт один результат.
    """

    def __init__(self, config: ClassifierConfig = None):
        self.config = (config or ClassifierConfig()).validate()

    def detect(self, frame: np.ndarray,
               on_stage: Optional[Callable[[str], None]] = None) -> GestureResult:
        result = GestureResult()
        stage = on_stage or (lambda name: None)

        stage("preprocessing")
        try:
            mask = preprocess(frame, self.config)
        except InvalidFormat as e:
            logger.warning("Mat is not in the expected format: %s", e)
            result.failure = INVALID_FORMAT
            return result

        stage("selecting")
        contour = select_contour(mask, self.config)
        if contour is None:
            result.failure = NO_CONTOUR
            return result
        result.contour = contour

        stage("analyzing")
        analysis = analyze(contour, self.config)
        if not analysis.ok:
            logger.debug("Geometry error absorbed: %s", analysis.error)
            result.failure = GEOMETRY
            return result
        result.hull = analysis.hull
        result.defects = analysis.defects

        stage("counting")
        gaps = accepted_defects(contour, analysis.defects, self.config)
        result.finger_gaps = [tuple(int(v) for v in contour[d.far][0]) for d in gaps]
        result.finger_count = count_fingers(contour, analysis.defects, self.config)
        return result

    def count(self, frame: np.ndarray) -> int:
        return self.detect(frame).finger_count
