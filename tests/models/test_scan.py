"""Tests for the scan records and summary models."""

import numpy as np
import pytest

from ptxkit.models.scan import RasterDimensions, RasterPosition, RegistrationParameters, ScanInfo
from ptxkit.models.summary import PtxSummary, RegistrationModel, ScanSummary


def test_raster_position_mapping_is_column_major():
    dimensions = RasterDimensions(columns=3, rows=2)

    assert dimensions.count == 6
    assert [dimensions.position(i) for i in range(dimensions.count)] == [
        RasterPosition(0, 0),
        RasterPosition(0, 1),
        RasterPosition(1, 0),
        RasterPosition(1, 1),
        RasterPosition(2, 0),
        RasterPosition(2, 1),
    ]


def test_default_scan_info():
    info = ScanInfo()
    assert info.dimensions.count == 0
    np.testing.assert_array_equal(info.registration.as_matrix(), np.eye(4))


def test_registration_as_matrix():
    registration = RegistrationParameters(
        rotation=((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        translation=(5.0, 6.0, 7.0),
    )
    matrix = registration.as_matrix()

    assert matrix.shape == (4, 4)
    np.testing.assert_array_equal(matrix[:3, 3], [5.0, 6.0, 7.0])
    np.testing.assert_array_equal(matrix[3], [0.0, 0.0, 0.0, 1.0])
    assert matrix[0, 1] == -1.0


def _registration():
    return RegistrationModel(rotation=[[1, 0, 0], [0, 1, 0], [0, 0, 1]], translation=[0, 0, 0])


def test_registration_model_rejects_bad_shapes():
    with pytest.raises(ValueError):
        RegistrationModel(rotation=[[1, 0], [0, 1]], translation=[0, 0, 0])
    with pytest.raises(ValueError):
        RegistrationModel(rotation=[[1, 0, 0], [0, 1, 0], [0, 0, 1]], translation=[0, 0])


def test_scan_summary_counts_must_add_up():
    with pytest.raises(ValueError):
        ScanSummary(
            index=0, columns=2, rows=2, total_points=4,
            sampled_points=3, unsampled_points=0, registration=_registration(),
        )


def test_ptx_summary_scan_count_must_match():
    scan = ScanSummary(
        index=0, columns=1, rows=1, total_points=1,
        sampled_points=1, unsampled_points=0, registration=_registration(),
    )
    assert PtxSummary(filename="a.ptx", scan_count=1, scans=[scan]).sampled_points == 1
    with pytest.raises(ValueError):
        PtxSummary(filename="a.ptx", scan_count=2, scans=[scan])
