# ==============================================
# Report
# ==============================================
#
# Renders the statistics of a run as plain text.
#
#   Integer statistics:
#   Count: 2
#   Min: -7
#   Max: 42
#   Sum: 35
#   Average: 17.5
#
#   Float statistics:
#   ...
#
# Min/Max/Sum/Average (or the string lengths) only appear in
# verbose mode. An empty category prints "No data found." instead.
#
# ==============================================

import sys
from decimal import Decimal
from typing import Iterable, List, Optional, TextIO

from line_sorter.analysis import LineStats

NO_DATA = "No data found."


def format_value(value) -> str:
    # str() of a huge int hits the interpreter's digit limit, Decimal does not
    if isinstance(value, int):
        return str(Decimal(value))
    return str(value)


def render_category(stats: LineStats, verbose: bool = False) -> List[str]:
    lines = [f"{stats.category.label} statistics:", f"Count: {stats.count}"]

    if not stats.has_data:
        lines.append(NO_DATA)
        return lines

    if not verbose:
        return lines

    if stats.category.is_numeric:
        lines.append(f"Min: {format_value(stats.minimum)}")
        lines.append(f"Max: {format_value(stats.maximum)}")
        lines.append(f"Sum: {format_value(stats.total)}")
        lines.append(f"Average: {stats.average}")
    else:
        lines.append(f"Shortest length: {stats.minimum}")
        lines.append(f"Longest length: {stats.maximum}")
    return lines


def render_report(stats: Iterable[LineStats], verbose: bool = False) -> str:
    """
    Render the report for all categories.

    Args:
        stats: One LineStats per category, in report order
        verbose: Include min/max/sum/average, not just the count

    Returns:
        The report text, sections separated by a blank line.
    """
    sections = ["\n".join(render_category(s, verbose)) for s in stats]
    return "\n\n".join(sections)


def print_report(stats: Iterable[LineStats], verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    print(render_report(stats, verbose), file=stream or sys.stdout)
