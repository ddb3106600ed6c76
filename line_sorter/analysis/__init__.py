# ==============================================
# ANALYSIS
# ==============================================
#
# Accumulates running statistics for classified lines.
#
# Modules:
# --------
# - line_stats.py   → Data class holding the stats for one category
# - accumulator.py  → fold() plus the three-category StatsAccumulator
#
# ==============================================

from .line_stats import LineStats
from .accumulator import StatsAccumulator, fold

__all__ = ["LineStats", "StatsAccumulator", "fold"]
