#!/usr/bin/env python3
"""
Console report for PTX files.
Streams every scan, prints a table of dimensions and point counts, and checks
the results against expected scan and per-scan sampled point counts.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ptxkit.core.config import load_config
from ptxkit.core.exceptions import PtxError
from ptxkit.core.scan_summary import summarize_ptx
from ptxkit.models.summary import PtxSummary

console = Console()


class CheckStats:
    """Pass/fail tally of the report checks"""

    def __init__(self):
        self.passed = 0
        self.failed = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def success_rate(self) -> float:
        return self.passed / self.total if self.total else 0.0

    def check(self, passed: bool, name: str) -> None:
        if passed:
            self.passed += 1
            console.print(f"{name} : [green]PASS[/green]")
        else:
            self.failed += 1
            console.print(f"{name} : [red]FAIL[/red]")


def build_scan_table(summary: PtxSummary) -> Table:
    table = Table(title=f"Scans in {summary.filename}")
    table.add_column("Scan", justify="right")
    table.add_column("Columns", justify="right")
    table.add_column("Rows", justify="right")
    table.add_column("Records", justify="right")
    table.add_column("Sampled", justify="right", style="green")
    table.add_column("Unsampled", justify="right", style="dim")
    table.add_column("Translation")

    for scan in summary.scans:
        translation = ", ".join(f"{v:.3f}" for v in scan.registration.translation)
        table.add_row(
            str(scan.index),
            str(scan.columns),
            str(scan.rows),
            str(scan.total_points),
            str(scan.sampled_points),
            str(scan.unsampled_points),
            translation,
        )
    return table


def run_checks(
    summary: PtxSummary, expect_scans: Optional[int], expect_points: List[int]
) -> CheckStats:
    """Compare a summary with expected counts, printing one line per check."""
    stats = CheckStats()
    if expect_scans is not None:
        stats.check(summary.scan_count == expect_scans, "Scan count")
    for index, expected in enumerate(expect_points):
        actual = summary.scans[index].sampled_points if index < summary.scan_count else None
        stats.check(actual == expected, f"Scan {index} point count")
    return stats


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report the scans of a PTX file")
    parser.add_argument("ptx_file", help="Path to the PTX file")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--expect-scans", type=int, help="Expected number of scans")
    parser.add_argument(
        "--expect-points",
        type=int,
        nargs="*",
        default=[],
        help="Expected sampled point count of each scan, in file order",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_config(args.config)
    logging.basicConfig(level=settings.logging.level)

    try:
        summary = summarize_ptx(args.ptx_file, config=settings.reader)
    except (FileNotFoundError, PtxError) as e:
        console.print(f"❌ {e}", style="red")
        return 1

    console.print(build_scan_table(summary))

    stats = run_checks(summary, args.expect_scans, args.expect_points)
    if stats.total:
        console.print(f"Success rate : {stats.success_rate * 100:.0f}%")
    return 1 if stats.failed else 0


if __name__ == "__main__":
    sys.exit(main())
