# ==============================================
# STORAGE
# ==============================================
#
# Output files, one per category.
#
# Modules:
# --------
# - sink_router.py  → Opens the three sinks and writes lines to them
#
# ==============================================

from .sink_router import SinkRouter, RouteResult

__all__ = [
    "SinkRouter",
    "RouteResult",
]
