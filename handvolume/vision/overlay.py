import cv2
import numpy as np

from .gesture_detector import GestureResult

CONTOUR_COLOR = (0, 255, 0)
HULL_COLOR = (255, 128, 0)
GAP_COLOR = (0, 0, 255)


def draw_overlay(frame: np.ndarray, result: GestureResult) -> np.ndarray:
    """Рисует контур руки, оболочку и найденные впадины прямо на кадре (BGR)."""
    if result is None or result.contour is None:
        return frame

    cv2.drawContours(frame, [result.contour], -1, CONTOUR_COLOR, 2)
    if result.hull is not None:
        hull_points = result.contour[result.hull.reshape(-1)]
        cv2.polylines(frame, [hull_points], True, HULL_COLOR, 1, cv2.LINE_AA)
    for x, y in result.finger_gaps:
        cv2.circle(frame, (x, y), 5, GAP_COLOR, -1)

    cv2.putText(frame, f"Fingers: {result.finger_count}", (10, 30),
                cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
    return frame
