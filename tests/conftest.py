"""
This module contains pytest fixtures that can be reused across multiple test files.
"""
import sys
from pathlib import Path

# Add the project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import pytest

IDENTITY_ROWS = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
UNSAMPLED_RECORD = "0 0 0 0.5 0 0 0"


def header_lines(columns, rows, rotation=IDENTITY_ROWS, translation=(0.0, 0.0, 0.0)):
    """Header of one scan, with the 4-value matrix rows real scanners write."""
    lines = [
        str(columns),
        str(rows),
        "0 0 0",
        "1 0 0",
        "0 1 0",
        "0 0 1",
    ]
    lines += [f"{r[0]} {r[1]} {r[2]} 0" for r in rotation]
    lines.append(f"{translation[0]} {translation[1]} {translation[2]} 1")
    return lines


def record_line(column, row, index):
    """A sampled record whose coordinates encode its raster position."""
    return f"{column + 1} {row + 1} {index * 0.5} 0.25 {index % 256} 128 255"


def scan_lines(columns, rows, unsampled=(), **header_kwargs):
    """Header and records of one scan. Records listed in `unsampled` are written as (0, 0, 0)."""
    lines = header_lines(columns, rows, **header_kwargs)
    unsampled = set(unsampled)
    for index in range(columns * rows):
        if index in unsampled:
            lines.append(UNSAMPLED_RECORD)
        else:
            lines.append(record_line(index // rows, index % rows, index))
    return lines


@pytest.fixture
def make_scan():
    """Build the lines of a scan."""
    return scan_lines


@pytest.fixture
def make_header():
    return header_lines


@pytest.fixture
def write_ptx(tmp_path):
    """Write lines to a PTX file in the test directory and return its path."""

    def _write(lines, name="test.ptx", newline="\n"):
        path = tmp_path / name
        with open(path, "w", newline="") as f:
            f.write(newline.join(lines) + newline)
        return path

    return _write


@pytest.fixture
def two_scan_ptx(write_ptx):
    """
    Two scans: 25x30 with 673 sampled records and 10x10 with 90 sampled records.
    """
    first = scan_lines(25, 30, unsampled=list(range(0, 750, 9))[:77], translation=(1.5, -2.0, 0.25))
    second = scan_lines(10, 10, unsampled=range(0, 100, 10))
    return write_ptx(first + second, name="two_scans.ptx")


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a sample YAML config file for testing."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "reader:\n"
        "  delimiter: ' '\n"
        "  strict_headers: true\n"
        "  skip_unsampled: false\n"
        "logging:\n"
        "  level: debug\n"
    )
    return config_path
