"""Thin long monthly series down to a readable number of chart points."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")

FULL_SERIES_LIMIT = 24
YEARLY_STEP_THRESHOLD = 60


def chart_points(series: Sequence[T]) -> List[T]:
    """
    Pick the points worth plotting from a month-by-month series.

      - 24 points or fewer: everything.
      - otherwise the first and last points, plus every 12th index for
        series longer than 60 and every 6th index below that.
    """
    total = len(series)
    if total <= FULL_SERIES_LIMIT:
        return list(series)

    step = 12 if total > YEARLY_STEP_THRESHOLD else 6
    return [
        point
        for index, point in enumerate(series)
        if index == 0 or index == total - 1 or index % step == 0
    ]
