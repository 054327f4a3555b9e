"""Mathematical helpers for angles."""
from __future__ import annotations


def normalize_degrees(angle: float) -> float:
    """Normalize angle to [0, 360)."""
    angle = angle % 360.0
    if angle < 0:
        angle += 360.0
    return angle
