# ==============================================
# SinkRouter
# ==============================================
#
# PURPOSE:
#   Owns the three output files (one per category) and writes each
#   classified line to the file of its category.
#
# CLASS: SinkRouter
# -----------------
#   Context manager. The sinks are opened on __enter__ (all three at
#   once, before any line is read) and closed on __exit__, even when
#   the run fails halfway.
#
#   Constructor:
#   ------------
#   - __init__(paths: dict[Category, Path], append: bool = False,
#              encoding: str = "utf-8")
#
#   Methods:
#   --------
#   - open() -> SinkRouter
#   - route(category, line) -> bool
#       Write line + "\n". A failing write is logged and recorded in
#       the RouteResult; it never stops the run.
#   - close() -> None
#
# DATA CLASS: RouteResult
# -----------------------
#   - lines_routed: dict[str, int]  → successful writes per category
#   - errors: list[str]             → one message per failed write
#
# ==============================================

import logging
from contextlib import ExitStack
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from line_sorter.classification import Category

logger = logging.getLogger(__name__)


@dataclass
class RouteResult:
    lines_routed: Dict[str, int] = field(
        default_factory=lambda: {category.value: 0 for category in Category}
    )
    errors: List[str] = field(default_factory=list)

    @property
    def total_routed(self) -> int:
        return sum(self.lines_routed.values())


class SinkRouter:
    def __init__(self, paths: Dict[Category, Path], append: bool = False, encoding: str = "utf-8"):
        missing = [category.value for category in Category if category not in paths]
        if missing:
            raise ValueError(f"No output path for: {', '.join(missing)}")

        self.paths = {category: Path(paths[category]) for category in Category}
        self.append = append
        self.encoding = encoding
        self.result = RouteResult()
        self._sinks: Dict[Category, TextIO] = {}
        self._stack: Optional[ExitStack] = None

    @property
    def mode(self) -> str:
        return "a" if self.append else "w"

    def open(self) -> "SinkRouter":
        if self._stack is not None:
            return self

        sinks = {}
        with ExitStack() as stack:
            for category in Category:
                path = self.paths[category]
                # newline="\n" keeps the output identical on every platform
                sinks[category] = stack.enter_context(
                    open(path, self.mode, encoding=self.encoding, newline="\n")
                )
                logger.debug("Opened %s sink %s (mode=%s)", category.value, path, self.mode)
            # Only keep the files open if all three opened
            self._stack = stack.pop_all()
        self._sinks = sinks
        return self

    def route(self, category: Category, line: str) -> bool:
        """
        Append one line to the sink of its category.

        Returns:
            True if the line was written, False if the write failed.
        """
        if self._stack is None:
            raise RuntimeError("SinkRouter is not open")

        try:
            self._sinks[category].write(line + "\n")
        except (OSError, UnicodeEncodeError) as e:
            message = f"Error writing to {self.paths[category]}: {e}"
            logger.error(message)
            self.result.errors.append(message)
            return False

        self.result.lines_routed[category.value] += 1
        return True

    def close(self) -> None:
        if self._stack is None:
            return
        stack, self._stack = self._stack, None
        self._sinks = {}
        stack.close()

    def __enter__(self) -> "SinkRouter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
