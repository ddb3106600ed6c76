# ==============================================
# StatsAccumulator
# ==============================================
#
# PURPOSE:
#   Fold classified lines into per-category statistics.
#
# FUNCTION:
# ---------
# - fold(stats, category, raw_line) -> LineStats
#     Parse the line for its category and update the stats in place.
#     Returns the same stats object.
#
# CLASS: StatsAccumulator
# -----------------------
#   Owns three independent LineStats, one per category.
#
#   Methods:
#   --------
#   - fold(category, raw_line) -> LineStats
#   - get(category) -> LineStats
#   - all_stats() -> list[LineStats]   (integer, float, string order)
#   - total_count -> int               (property)
#   - reset() -> None
#
# ==============================================

from typing import Dict, List

from .line_stats import LineStats
from line_sorter.classification import Category, LineClassifier


def fold(stats: LineStats, category: Category, raw_line: str) -> LineStats:
    """
    Fold one classified line into ``stats``.

    Args:
        stats: Statistics of the line's category
        category: Category returned by the classifier for ``raw_line``
        raw_line: The line without its terminator

    Returns:
        The updated ``stats`` object.

    Raises:
        ValueError: if ``stats`` belongs to another category.
        ClassificationInvariantError: if a numeric line fails to parse.
    """
    if stats.category is not category:
        raise ValueError(
            f"Cannot fold a {category.value} line into {stats.category.value} statistics"
        )

    stats.update(LineClassifier.parse(raw_line, category))
    return stats


class StatsAccumulator:
    """
    Keeps the running statistics for all three categories of one run.
    """

    def __init__(self):
        self.stats: Dict[Category, LineStats] = {}
        self.reset()

    def fold(self, category: Category, raw_line: str) -> LineStats:
        return fold(self.stats[category], category, raw_line)

    def get(self, category: Category) -> LineStats:
        return self.stats[category]

    def all_stats(self) -> List[LineStats]:
        return [self.stats[category] for category in Category]

    @property
    def total_count(self) -> int:
        """Number of lines folded across every category."""
        return sum(stats.count for stats in self.stats.values())

    def reset(self) -> None:
        """Start over with empty statistics."""
        self.stats = {category: LineStats(category) for category in Category}
