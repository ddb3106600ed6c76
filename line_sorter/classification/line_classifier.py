import re
from decimal import Decimal, InvalidOperation
from typing import Union

from .category import Category
from line_sorter.errors import ClassificationInvariantError


class LineClassifier:
    # [0-9] rather than \d: str patterns would also accept non-ASCII digits
    INT_PATTERN = re.compile(r"-?[0-9]+")
    FLOAT_PATTERN = re.compile(r"-?[0-9]*\.[0-9]+(?:[eE][+-]?[0-9]+)?")

    @classmethod
    def classify(cls, line: str) -> Category:
        """
        Decide the category of a single line (without its line terminator).

        The integer test runs first, then the float test; everything else is
        a string. Both patterns must match the whole line.
        """
        if cls.INT_PATTERN.fullmatch(line):
            return Category.INTEGER

        if cls.FLOAT_PATTERN.fullmatch(line):
            return Category.FLOAT

        return Category.STRING

    @classmethod
    def parse(cls, line: str, category: Category) -> Union[int, float]:
        """
        Convert a classified line into the value tracked by the statistics.

        Integers become ``int``, floats become ``float`` and strings are
        measured by their length in characters. Integers go through
        Decimal, which has no limit on the number of digits.

        Raises:
            ClassificationInvariantError: if a numeric line cannot be parsed.
        """
        if category is Category.STRING:
            return len(line)

        try:
            if category is Category.INTEGER:
                return int(Decimal(line))
            return float(line)
        except (ValueError, InvalidOperation) as e:
            raise ClassificationInvariantError(line, category) from e
