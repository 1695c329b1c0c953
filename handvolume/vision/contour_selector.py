# handvolume/vision/contour_selector.py
import logging
from typing import Optional

import cv2
import numpy as np

from handvolume.config import ClassifierConfig

logger = logging.getLogger(__name__)


def find_candidates(mask: np.ndarray):
    contours, _ = cv2.findContours(mask, cv2.RETR_TREE, cv2.CHAIN_APPROX_SIMPLE)
    return list(contours)


def select_contour(mask: np.ndarray, config: ClassifierConfig = None) -> Optional[np.ndarray]:
    """
    Возвращает самый большой по площади контур (предположительно руку) или None.
    Пустая маска - нормальная ситуация (руки нет в кадре), а не ошибка.
    """
    config = config or ClassifierConfig()

    best = None
    best_area = 0.0
    for contour in find_candidates(mask):
        if len(contour) < config.min_contour_points:
            continue
        area = cv2.contourArea(contour)
        if area <= config.min_contour_area:
            continue
        # строгое сравнение: при равенстве остаётся первый найденный
        if best is None or area > best_area:
            best = contour
            best_area = area

    if best is None:
        logger.debug("No valid contours found.")
    return best
