"""Temperature band classification."""

from __future__ import annotations

from typing import Union

from models.records import Band

HOT_THRESHOLD = 30
WARM_THRESHOLD = 20


def classify(temp: Union[int, float]) -> Band:
    """Return the band for ``temp``; cut points belong to the hotter band."""
    if temp >= HOT_THRESHOLD:
        return Band.hot
    if temp >= WARM_THRESHOLD:
        return Band.warm
    return Band.cool
