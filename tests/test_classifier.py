# ==============================================
# Tests for Classification Module
# ==============================================

import pytest

from line_sorter.classification import Category, LineClassifier
from line_sorter.errors import ClassificationInvariantError


class TestLineClassifier:
    @pytest.mark.parametrize("line", ["0", "42", "-7", "007", "-0", "12345678901234567890"])
    def test_integers(self, line):
        """Optional minus followed by digits only."""
        assert LineClassifier.classify(line) == Category.INTEGER

    @pytest.mark.parametrize("line", ["3.14", "-0.5e2", ".5", "-.5", "1.0E10", "2.5e-3", "0.0e+0"])
    def test_floats(self, line):
        """Digits, a dot, at least one digit, optional exponent."""
        assert LineClassifier.classify(line) == Category.FLOAT

    @pytest.mark.parametrize("line", [
        "",
        "-",
        "hello",
        " 42",
        "42 ",
        "1.",
        "1e5",
        "+5",
        "1.2.3",
        "3.14e",
        "--1",
        "0x1F",
        "١٢٣",  # non-ASCII digits
        "192.168.1.1",
    ])
    def test_strings(self, line):
        """Everything that is not a complete integer or float."""
        assert LineClassifier.classify(line) == Category.STRING

    def test_integer_checked_before_float(self):
        """A pure digit line is an integer even though float() accepts it."""
        assert LineClassifier.classify("123") == Category.INTEGER

    def test_classification_is_deterministic(self, sample_lines):
        """Classifying twice gives the same answer."""
        first = [LineClassifier.classify(line) for line in sample_lines]
        second = [LineClassifier.classify(line) for line in sample_lines]
        assert first == second

    @pytest.mark.parametrize("line", [
        "42", "-7", "007", "3.14", "-0.5e2", ".5", "1.0E10", "hello", "", "-", "1e5",
    ])
    def test_parse_never_disagrees_with_classify(self, line):
        """Whatever classify() returns, parse() can convert."""
        category = LineClassifier.classify(line)
        value = LineClassifier.parse(line, category)
        if category is Category.INTEGER:
            assert isinstance(value, int)
        elif category is Category.FLOAT:
            assert isinstance(value, float)
        else:
            assert value == len(line)

    def test_parse_values(self):
        assert LineClassifier.parse("007", Category.INTEGER) == 7
        assert LineClassifier.parse("-0.5e2", Category.FLOAT) == -50.0
        assert LineClassifier.parse("héllo", Category.STRING) == 5

    def test_parse_integer_longer_than_digit_limit(self):
        """Integers past the int() string digit limit still parse."""
        line = "1" * 5000
        assert LineClassifier.classify(line) == Category.INTEGER
        assert LineClassifier.parse(line, Category.INTEGER) == (10 ** 5000 - 1) // 9
        assert LineClassifier.parse("-" + line, Category.INTEGER) == -(10 ** 5000 - 1) // 9

    def test_parse_rejects_mismatched_line(self):
        """A numeric category with non-numeric text is an internal defect."""
        with pytest.raises(ClassificationInvariantError) as exc_info:
            LineClassifier.parse("abc", Category.INTEGER)
        assert exc_info.value.line == "abc"
        assert exc_info.value.category is Category.INTEGER


class TestCategory:
    def test_filenames(self):
        assert Category.INTEGER.filename == "integers.txt"
        assert Category.FLOAT.filename == "floats.txt"
        assert Category.STRING.filename == "strings.txt"

    def test_order(self):
        """Integer, float, string is the order used everywhere."""
        assert list(Category) == [Category.INTEGER, Category.FLOAT, Category.STRING]

    def test_labels(self):
        assert [c.label for c in Category] == ["Integer", "Float", "String"]
