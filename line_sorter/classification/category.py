from enum import Enum


class Category(Enum):
    """
    The three mutually exclusive kinds of input line.

    Declaration order is the order used everywhere categories are listed
    (output files, statistics, report sections).
    """
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @property
    def filename(self) -> str:
        """Fixed output filename, before any prefix is applied."""
        return _FILENAMES[self]

    @property
    def label(self) -> str:
        """Human readable name used in the report."""
        return self.value.capitalize()

    @property
    def is_numeric(self) -> bool:
        return self is not Category.STRING


_FILENAMES = {
    Category.INTEGER: "integers.txt",
    Category.FLOAT: "floats.txt",
    Category.STRING: "strings.txt",
}
