# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# USAGE:
# ------
#   line-sorter [-a] [-o PATH] [-p PREFIX] [-s | -f] FILE [FILE ...]
#   python -m line_sorter ...
#
#   -a            append to existing output files instead of overwriting
#   -o PATH       directory for the output files
#   -p PREFIX     prefix for the output file names
#   -s            short statistics (counts only)
#   -f            full statistics (min, max, sum, average)
#
#   Defaults come from LINE_SORTER_* environment variables / .env,
#   see config.py. Flags always win.
#
# EXIT STATUS:
# ------------
#   0  run finished (individual unreadable files are only reported)
#   1  output directory or output files could not be created
#   2  invalid command line or configuration
#
# ==============================================

import argparse
import logging
import sys
from typing import List, Optional

from line_sorter import __version__
from line_sorter.config import SorterConfig, get_config
from line_sorter.errors import ConfigError
from line_sorter.report import print_report
from line_sorter.sort_and_report import process

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-sorter",
        description="Sort lines of text files into integers, floats and strings.",
    )
    parser.add_argument("-a", "--append", action="store_true", default=None,
                        help="Append to existing output files")
    parser.add_argument("-o", "--output-dir", metavar="PATH", default=None,
                        help="Directory for the output files")
    parser.add_argument("-p", "--prefix", default=None,
                        help="Prefix for the output file names")
    parser.add_argument("-s", "--short", dest="verbose", action="store_false", default=None,
                        help="Print counts only")
    parser.add_argument("-f", "--full", dest="verbose", action="store_true",
                        default=None, help="Print full statistics")
    parser.add_argument("--encoding", default=None,
                        help="Encoding of input and output files")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Diagnostics written to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("files", nargs="*", metavar="FILE", help="Input files")
    return parser


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = SorterConfig.from_defaults(
            args.files,
            get_config(),
            output_dir=args.output_dir,
            prefix=args.prefix,
            append=args.append,
            verbose=args.verbose,
            encoding=args.encoding,
        )
    except ConfigError as e:
        parser.error(str(e))

    if not config.input_sources:
        print("No input files specified.")
        return 0

    try:
        result = process(config)
    except OSError as e:
        # Output directory or sinks could not be created
        logger.error("Cannot write output files: %s", e)
        return 1
    print_report(result.stats, verbose=config.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
