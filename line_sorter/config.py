# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Typed configuration for one sorting run, plus default values
#   loaded from environment variables / .env file.
#
# CLASSES:
# --------
# - SorterDefaults (dataclass)
#     output_dir: str    (default ".")
#     prefix: str        (default "")
#     append: bool       (default False)
#     verbose: bool      (default False)
#     encoding: str      (default "utf-8")
#
# - SorterConfig (dataclass)
#     input_sources: list   (paths or iterables of text lines)
#     output_dir / prefix / append / verbose / encoding as above
#
# FUNCTIONS:
# ----------
# - get_config() -> SorterDefaults
#     Load .env using python-dotenv, read LINE_SORTER_* variables.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton (tests, long-lived processes).
#
# ENVIRONMENT:
# ------------
#   LINE_SORTER_OUTPUT_DIR, LINE_SORTER_PREFIX, LINE_SORTER_APPEND,
#   LINE_SORTER_VERBOSE, LINE_SORTER_ENCODING
#
# USAGE:
# ------
#   from line_sorter.config import SorterConfig, get_config
#   defaults = get_config()
#   config = SorterConfig.from_defaults(["a.txt", "b.txt"], defaults)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv

from line_sorter.classification import Category
from line_sorter.errors import ConfigError

TRUE_VARIANTS = {"1", "true", "yes", "on"}
FALSE_VARIANTS = {"0", "false", "no", "off", ""}


@dataclass
class SorterDefaults:
    """Defaults applied when an option is not given explicitly."""
    output_dir: str = "."
    prefix: str = ""
    append: bool = False
    verbose: bool = False
    encoding: str = "utf-8"


@dataclass
class SorterConfig:
    """Everything a single run needs."""
    input_sources: List[Any] = field(default_factory=list)
    output_dir: str = "."
    prefix: str = ""
    append: bool = False
    verbose: bool = False
    encoding: str = "utf-8"

    def output_path(self, category: Category) -> Path:
        """Path of the output file for ``category``."""
        return Path(self.output_dir) / f"{self.prefix}{category.filename}"

    def output_paths(self) -> dict:
        return {category: self.output_path(category) for category in Category}

    @classmethod
    def from_defaults(cls, input_sources, defaults: Optional[SorterDefaults] = None, **overrides) -> "SorterConfig":
        """
        Build a config from defaults, replacing any option passed as a
        keyword argument that is not None.
        """
        defaults = defaults or get_config()
        values = {
            "output_dir": defaults.output_dir,
            "prefix": defaults.prefix,
            "append": defaults.append,
            "verbose": defaults.verbose,
            "encoding": defaults.encoding,
        }
        for key, value in overrides.items():
            if key not in values:
                raise ConfigError(f"Unknown option: {key}")
            if value is not None:
                values[key] = value
        return cls(input_sources=list(input_sources), **values)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VARIANTS:
        return True
    if value in FALSE_VARIANTS:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


# Singleton instance
_config_instance: Optional[SorterDefaults] = None


def get_config() -> SorterDefaults:
    """
    Load defaults from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        SorterDefaults: Default option values

    Raises:
        ConfigError: if a boolean variable holds an unrecognised value
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # .env in the working directory; existing variables win
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    _config_instance = SorterDefaults(
        output_dir=os.getenv("LINE_SORTER_OUTPUT_DIR", "."),
        prefix=os.getenv("LINE_SORTER_PREFIX", ""),
        append=_env_bool("LINE_SORTER_APPEND", False),
        verbose=_env_bool("LINE_SORTER_VERBOSE", False),
        encoding=os.getenv("LINE_SORTER_ENCODING", "utf-8"),
    )

    return _config_instance


def reset_config() -> None:
    global _config_instance
    _config_instance = None
