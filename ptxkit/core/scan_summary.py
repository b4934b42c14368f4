"""Summaries of PTX files built by streaming their scans."""

import logging
import os
from typing import List, Optional

from .config import ReaderConfig
from .ptx_reader import PtxFile
from ..models.scan import Point, ScanInfo
from ..models.summary import PtxSummary, RegistrationModel, ScanSummary

logger = logging.getLogger(__name__)


class PointCollector:
    """Sink that keeps the points of a scan in a list, optionally dropping unsampled ones."""

    def __init__(self, skip_unsampled: bool = True):
        self.skip_unsampled = skip_unsampled
        self.points: List[Point] = []
        self.unsampled_count = 0

    def insert(self, point: Point) -> None:
        if point.unsampled:
            self.unsampled_count += 1
            if self.skip_unsampled:
                return
        self.points.append(point)


class CountingSink:
    """Counts sampled and unsampled points without keeping them."""

    def __init__(self, index: int, info: ScanInfo):
        self.index = index
        self.info = info
        self.sampled = 0
        self.unsampled = 0

    def insert(self, point: Point) -> None:
        if point.unsampled:
            self.unsampled += 1
        else:
            self.sampled += 1

    def to_summary(self) -> ScanSummary:
        dimensions = self.info.dimensions
        registration = self.info.registration
        return ScanSummary(
            index=self.index,
            columns=dimensions.columns,
            rows=dimensions.rows,
            total_points=self.sampled + self.unsampled,
            sampled_points=self.sampled,
            unsampled_points=self.unsampled,
            registration=RegistrationModel(
                rotation=[list(row) for row in registration.rotation],
                translation=list(registration.translation),
            ),
        )


def summarize_ptx(file_path: str, config: Optional[ReaderConfig] = None) -> PtxSummary:
    """
    Count the points of every scan in a PTX file.

    Args:
        file_path: Path to the PTX file
        config: Reader options

    Returns:
        Summary with one entry per scan

    Raises:
        FileNotFoundError: If the file does not exist
        RecordError: If a point record is corrupt
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"PTX file not found: {file_path}")

    sinks: List[CountingSink] = []

    def on_scan(info: ScanInfo) -> CountingSink:
        sink = CountingSink(len(sinks), info)
        sinks.append(sink)
        return sink

    PtxFile(file_path, config=config).read_scans(on_scan)

    summary = PtxSummary(
        filename=os.path.basename(file_path),
        scan_count=len(sinks),
        scans=[sink.to_summary() for sink in sinks],
    )
    logger.info(
        f"{summary.filename}: {summary.scan_count} scans, {summary.sampled_points} sampled points"
    )
    return summary
