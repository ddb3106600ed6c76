# ==============================================
# LineSorter — Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties classification, statistics and the output sinks together
#   into a single run over all input sources.
#
#   ┌──────────────────────────────────────────────┐
#   │                 LineSorter                   │
#   │                                              │
#   │   input sources (files / line iterables)     │
#   │                 │ one line at a time         │
#   │                 ▼                            │
#   │   LineClassifier.classify(line)              │
#   │                 │ Category                   │
#   │                 ▼                            │
#   │   SinkRouter.route(category, line)           │
#   │                 │                            │
#   │                 ▼                            │
#   │   StatsAccumulator.fold(category, line)      │
#   └──────────────────────────────────────────────┘
#
# CLASS: LineSorter
# -----------------
#   - __init__(config: SorterConfig)
#   - run() -> SortResult
#   - process_line(line, router) -> Category
#
# FUNCTION:
# ---------
#   - process(config, input_sources=None) -> SortResult
#       The single entry point used by the CLI.
#
# ERRORS:
# -------
#   - A source that cannot be opened or read is logged and skipped;
#     lines read from it before the failure stay routed and counted.
#   - A failed write is logged; the line is still counted.
#   - ClassificationInvariantError is never caught here.
#
# ==============================================

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from line_sorter.analysis import LineStats, StatsAccumulator
from line_sorter.classification import Category, LineClassifier
from line_sorter.config import SorterConfig
from line_sorter.storage import SinkRouter

logger = logging.getLogger(__name__)


@dataclass
class SortResult:
    stats: List[LineStats] = field(default_factory=list)
    lines_read: int = 0
    sources_read: List[str] = field(default_factory=list)
    failed_sources: List[str] = field(default_factory=list)
    write_errors: List[str] = field(default_factory=list)
    output_paths: Dict[str, str] = field(default_factory=dict)
    processed: bool = True

    def get_stats(self, category: Category) -> Optional[LineStats]:
        for stats in self.stats:
            if stats.category is category:
                return stats
        return None

    def get_summary(self) -> Dict[str, Any]:
        return {
            "processed": self.processed,
            "lines_read": self.lines_read,
            "sources_read": list(self.sources_read),
            "failed_sources": list(self.failed_sources),
            "write_errors": len(self.write_errors),
            "output_paths": dict(self.output_paths),
            "stats": {s.category.value: s.to_dict() for s in self.stats},
        }


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def _source_name(source: Any, index: int) -> str:
    if isinstance(source, (str, os.PathLike)):
        return str(source)
    return str(getattr(source, "name", f"<source {index}>"))


class LineSorter:
    """
    Sorts the lines of every input source into integer, float and
    string output files while collecting statistics.
    """

    def __init__(self, config: SorterConfig):
        self._config = config
        self._classifier = LineClassifier()
        self._accumulator = StatsAccumulator()

    @property
    def config(self) -> SorterConfig:
        return self._config

    def run(self, input_sources: Optional[Iterable[Any]] = None) -> SortResult:
        """
        Process every input source in order.

        Args:
            input_sources: Overrides ``config.input_sources`` when given.

        Returns:
            SortResult with the statistics and any per-source failures.
        """
        sources = list(self._config.input_sources if input_sources is None else input_sources)
        self._accumulator.reset()

        if not sources:
            logger.warning("No input files specified.")
            return SortResult(stats=self._accumulator.all_stats(), processed=False)

        paths = self._config.output_paths()
        Path(self._config.output_dir).mkdir(parents=True, exist_ok=True)
        result = SortResult(
            output_paths={category.value: str(path) for category, path in paths.items()}
        )

        with SinkRouter(paths, append=self._config.append, encoding=self._config.encoding) as router:
            for index, source in enumerate(sources):
                name = _source_name(source, index)
                try:
                    read = self._read_source(source, router)
                except (OSError, UnicodeDecodeError) as e:
                    message = f"Error reading file {name}: {e}"
                    logger.error(message)
                    result.failed_sources.append(message)
                    continue
                logger.info("Read %d lines from %s", read, name)
                result.sources_read.append(name)

        result.stats = self._accumulator.all_stats()
        result.lines_read = self._accumulator.total_count
        result.write_errors = list(router.result.errors)
        return result

    def process_line(self, line: str, router: SinkRouter) -> Category:
        """Classify one line, write it to its sink and fold it into the stats."""
        category = self._classifier.classify(line)
        router.route(category, line)
        # Counted even if the write failed
        self._accumulator.fold(category, line)
        return category

    def _read_source(self, source: Any, router: SinkRouter) -> int:
        count = 0
        for raw in self._iter_lines(source):
            self.process_line(_strip_terminator(raw), router)
            count += 1
        return count

    def _iter_lines(self, source: Any) -> Iterator[str]:
        if isinstance(source, (str, os.PathLike)):
            with open(source, "r", encoding=self._config.encoding) as f:
                yield from f
        else:
            yield from source


def process(config: SorterConfig, input_sources: Optional[Iterable[Any]] = None) -> SortResult:
    """Run one sorting pass with ``config``."""
    return LineSorter(config).run(input_sources)
