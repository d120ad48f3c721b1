"""
Point-to-line distance helpers for the LT2 search.
"""

import numpy as np


def point_to_line_distance(x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> float:
    """
    Perpendicular distance from (x, y) to the line through (x1, y1) and (x2, y2).

    A vertical line (x1 == x2) falls back to the vertical offset |y - y1|.
    """
    return float(distances_to_line(x1, y1, x2, y2, np.array([x]), np.array([y]))[0])


def distances_to_line(x1: float, y1: float, x2: float, y2: float,
                      xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Vectorized perpendicular distances of many points to one line."""
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)

    if x2 == x1:
        return np.abs(ys - y1)

    # |a*x + b*y + c| / sqrt(a^2 + b^2) with a = dy, b = -dx
    dx = x2 - x1
    dy = y2 - y1
    c = x2 * y1 - y2 * x1
    return np.abs(dy * xs - dx * ys + c) / np.hypot(dx, dy)
