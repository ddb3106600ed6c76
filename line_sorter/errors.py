# ==============================================
# Errors
# ==============================================
#
# Exceptions raised by the line sorter.
#
# - LineSorterError              → base class
# - ConfigError                  → invalid configuration, fatal before processing
# - ClassificationInvariantError → a line matched a numeric pattern but could
#                                  not be parsed; always a defect
#
# ==============================================


class LineSorterError(Exception):
    """Base class for all line sorter errors."""


class ConfigError(LineSorterError, ValueError):
    """Raised when the configuration cannot be used to start a run."""


class ClassificationInvariantError(LineSorterError, RuntimeError):
    """Raised when the classifier and the value parser disagree on a line."""

    def __init__(self, line: str, category):
        self.line = line
        self.category = category
        super().__init__(
            f"Line {line!r} was classified as {category.value} but could not be parsed"
        )
