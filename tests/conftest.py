# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - sample_lines      → the mixed example input used across modules
# - write_input       → write lines to a file under tmp_path
# - read_output       → read an output file back as a list of lines
# - sorter_config     → SorterConfig writing into tmp_path/out
# - clean_env         → no LINE_SORTER_* variables, fresh config singleton
#
# ==============================================

import os

import pytest

from line_sorter.config import SorterConfig, reset_config

ENV_VARIABLES = [
    "LINE_SORTER_OUTPUT_DIR",
    "LINE_SORTER_PREFIX",
    "LINE_SORTER_APPEND",
    "LINE_SORTER_VERBOSE",
    "LINE_SORTER_ENCODING",
]


@pytest.fixture
def sample_lines():
    """Two integers, two floats, two strings (one of them empty)."""
    return ["42", "-7", "3.14", "-0.5e2", "hello", ""]


@pytest.fixture
def write_input(tmp_path):
    """Return a helper that writes lines to tmp_path/<name>, newline-terminated."""
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def read_output():
    def _read(path):
        with open(path, encoding="utf-8", newline="") as f:
            return f.read().split("\n")[:-1]
    return _read


@pytest.fixture
def sorter_config(tmp_path):
    return SorterConfig(output_dir=str(tmp_path / "out"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep tests independent of the caller's environment and .env file."""
    for name in ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    # load_dotenv writes straight into os.environ
    for name in ENV_VARIABLES:
        os.environ.pop(name, None)
    reset_config()
