from __future__ import annotations

import pytest

from models.records import Band
from services.classifier import classify


@pytest.mark.parametrize(
    ("temp", "expected"),
    [
        (30, Band.hot),
        (29.999, Band.warm),
        (20, Band.warm),
        (19.999, Band.cool),
        (45.5, Band.hot),
        (-12, Band.cool),
        (0, Band.cool),
    ],
)
def test_classify_boundaries(temp: float, expected: Band) -> None:
    assert classify(temp) is expected


def test_classify_is_total_over_extreme_values() -> None:
    for temp in (float("-inf"), -1e9, 1e9, float("inf")):
        assert classify(temp) in set(Band)
