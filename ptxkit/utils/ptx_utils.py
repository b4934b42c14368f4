"""Utility functions for handling PTX files."""

import numpy as np
import open3d as o3d
from dataclasses import dataclass
from typing import List, Optional
import logging

from ptxkit.core.config import ReaderConfig
from ptxkit.core.ptx_reader import PtxFile
from ptxkit.core.scan_summary import PointCollector
from ptxkit.models.scan import ScanInfo

logger = logging.getLogger(__name__)


@dataclass
class ScanCloud:
    """Arrays holding the points of one scan"""
    info: ScanInfo
    points: np.ndarray  # (N, 3) float64 coordinates
    intensity: np.ndarray  # (N,) float64
    colors: np.ndarray  # (N, 3) float64, normalized to [0, 1]
    raster: np.ndarray  # (N, 2) int32 column/row
    unsampled_count: int = 0

    def __len__(self) -> int:
        return len(self.points)

    def to_open3d(self) -> o3d.geometry.PointCloud:
        """
        Build an Open3D point cloud of the scan.

        Coordinates stay in the scanner frame; the registration is not
        applied. Colors are only set when the scan has points.

        Returns:
            Open3D PointCloud object
        """
        pcd = o3d.geometry.PointCloud()
        pcd.points = o3d.utility.Vector3dVector(self.points)
        if len(self):
            pcd.colors = o3d.utility.Vector3dVector(self.colors)
        return pcd


class ScanArrayCollector(PointCollector):
    """Sink that turns the collected points of a scan into numpy arrays."""

    def __init__(self, info: ScanInfo, skip_unsampled: bool = True):
        super().__init__(skip_unsampled=skip_unsampled)
        self.info = info

    def to_scan_cloud(self) -> ScanCloud:
        points = np.array([(p.x, p.y, p.z) for p in self.points], dtype=np.float64).reshape(-1, 3)
        intensity = np.array([p.intensity for p in self.points], dtype=np.float64)
        colors = np.array([(p.r, p.g, p.b) for p in self.points], dtype=np.float64).reshape(-1, 3)
        raster = np.array(
            [(p.position.column, p.position.row) for p in self.points], dtype=np.int32
        ).reshape(-1, 2)
        return ScanCloud(
            info=self.info,
            points=points,
            intensity=intensity,
            colors=colors / 255.0,
            raster=raster,
            unsampled_count=self.unsampled_count,
        )


def read_ptx_scans(
    file_path: str, skip_unsampled: Optional[bool] = None, config: Optional[ReaderConfig] = None
) -> List[ScanCloud]:
    """
    Read every scan of a PTX file into numpy arrays.

    Args:
        file_path: Path to the PTX file
        skip_unsampled: Drop points without a laser return (0, 0, 0).
            Defaults to the skip_unsampled option of the config.
        config: Reader options

    Returns:
        One ScanCloud per scan, in file order
    """
    config = config or ReaderConfig()
    if skip_unsampled is None:
        skip_unsampled = config.skip_unsampled

    collectors: List[ScanArrayCollector] = []

    def on_scan(info: ScanInfo) -> ScanArrayCollector:
        collector = ScanArrayCollector(info, skip_unsampled=skip_unsampled)
        collectors.append(collector)
        return collector

    try:
        PtxFile(file_path, config=config).read_scans(on_scan)
    except Exception as e:
        logger.error(f"Error reading PTX file {file_path}: {str(e)}")
        raise

    scans = [collector.to_scan_cloud() for collector in collectors]
    logger.info(f"Loaded {sum(len(s) for s in scans)} points in {len(scans)} scans from {file_path}")
    return scans


def load_ptx_point_clouds(
    file_path: str, config: Optional[ReaderConfig] = None
) -> List[o3d.geometry.PointCloud]:
    """
    Read a PTX file into one Open3D point cloud per scan.

    Args:
        file_path: Path to the PTX file
        config: Reader options; skip_unsampled decides whether (0, 0, 0)
            points are kept

    Returns:
        Point clouds in file order
    """
    return [scan.to_open3d() for scan in read_ptx_scans(file_path, config=config)]
