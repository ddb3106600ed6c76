# ==============================================
# Line Sorter
# ==============================================
#
# Package Structure:
#
# line_sorter/
# ├── classification/     # Decide the category of every line
# ├── analysis/           # Running statistics per category
# ├── storage/            # Output files, one per category
# ├── config.py           # Configuration management
# ├── errors.py           # Exception types
# ├── report.py           # Statistics report
# ├── sort_and_report.py  # Orchestrator
# └── cli.py              # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
