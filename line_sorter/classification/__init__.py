# ==============================================
# CLASSIFICATION
# ==============================================
#
# Decides which category every input line belongs to.
#
# Modules:
# --------
# - category.py        → Category enum (integer / float / string)
# - line_classifier.py → Ordered pattern test and value parsing
#
# ==============================================

from .category import Category
from .line_classifier import LineClassifier

__all__ = ["Category", "LineClassifier"]
