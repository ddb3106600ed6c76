# ==============================================
# LineStats
# ==============================================
#
# PURPOSE:
#   Data class that holds the running statistics for one category
#   of lines (integers, floats or strings).
#
# CLASS: LineStats (dataclass)
# ----------------------------
#   Attributes:
#   -----------
#   - category: Category          → Which category these stats describe
#   - count: int                  → How many lines were folded in
#   - minimum: int | float | None → Smallest value (or string length) seen
#   - maximum: int | float | None → Largest value (or string length) seen
#   - total: int | float | None   → Running sum, numeric categories only
#
#   minimum / maximum / total stay None until the first line arrives.
#   None means "no data" and is never reported as zero.
#
#   Computed Properties:
#   --------------------
#   - has_data -> bool
#   - average -> float | None
#       total / count using true division, also for integers.
#
#   Methods:
#   --------
#   - update(value) -> None
#       Fold one already parsed value (number or string length).
#
#   - to_dict() -> dict
#       Plain representation for summaries and tests.
#
# ==============================================

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from line_sorter.classification import Category

Number = Union[int, float]


@dataclass
class LineStats:
    """
    Running statistics for a single category of lines.

    Integer totals are Python ints and never overflow.
    """

    category: Category
    count: int = 0
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    total: Optional[Number] = None

    # ======================================
    # Update logic
    # ======================================
    def update(self, value: Number) -> None:
        """
        Record one observed value.

        The first value sets minimum, maximum and total; later values are
        compared against the current extremes. Equal values keep the
        earliest one.

        Args:
            value: The parsed number, or the string length for strings
        """
        self.count += 1

        if self.minimum is None or value < self.minimum:
            self.minimum = value
        if self.maximum is None or value > self.maximum:
            self.maximum = value

        # Lengths are not summed
        if not self.category.is_numeric:
            return

        if self.total is None:
            self.total = value
        else:
            self.total += value

    # ======================================
    # Computed properties
    # ======================================
    @property
    def has_data(self) -> bool:
        return self.count > 0

    @property
    def average(self) -> Optional[float]:
        """
        Mean of all folded values, or None if nothing was folded
        or the category has no sum. Integer means beyond the float
        range are reported as signed infinity.
        """
        if self.total is None or self.count == 0:
            return None
        try:
            return self.total / self.count
        except OverflowError:
            return math.inf if self.total > 0 else -math.inf

    # ======================================
    # Serialization
    # ======================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "count": self.count,
            "min": self.minimum,
            "max": self.maximum,
            "sum": self.total,
            "average": self.average,
        }
