"""Models describing the contents of a PTX file."""

from typing import List
from pydantic import BaseModel, Field, field_validator, model_validator


class RegistrationModel(BaseModel):
    """Registration transform of a scan, as parsed from its header."""

    rotation: List[List[float]] = Field(..., description="3x3 rotation matrix, row major")
    translation: List[float] = Field(..., description="Translation vector [tx, ty, tz]")

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v):
        """Validate that the rotation is 3x3."""
        if len(v) != 3 or not all(len(row) == 3 for row in v):
            raise ValueError("Rotation must be a 3x3 matrix")
        return v

    @field_validator("translation")
    @classmethod
    def validate_translation(cls, v):
        if len(v) != 3:
            raise ValueError("Translation must have exactly 3 values")
        return v


class ScanSummary(BaseModel):
    """Point counts and header data of one scan."""

    index: int = Field(..., ge=0, description="Position of the scan in the file")
    columns: int = Field(..., ge=0)
    rows: int = Field(..., ge=0)
    total_points: int = Field(..., ge=0, description="Number of records, columns * rows")
    sampled_points: int = Field(default=0, ge=0)
    unsampled_points: int = Field(default=0, ge=0, description="Records at (0, 0, 0)")
    registration: RegistrationModel

    @model_validator(mode="after")
    def validate_counts(self):
        """Validate that the point counts add up to the raster size."""
        if self.total_points != self.columns * self.rows:
            raise ValueError("total_points must equal columns * rows")
        if self.sampled_points + self.unsampled_points != self.total_points:
            raise ValueError("sampled_points + unsampled_points must equal total_points")
        return self


class PtxSummary(BaseModel):
    """Summary of every scan in a PTX file."""

    filename: str = Field(..., description="Original filename")
    scan_count: int = Field(..., ge=0)
    scans: List[ScanSummary] = Field(default_factory=list)

    @property
    def sampled_points(self) -> int:
        return sum(scan.sampled_points for scan in self.scans)

    @model_validator(mode="after")
    def validate_scan_count(self):
        if self.scan_count != len(self.scans):
            raise ValueError("scan_count must match the number of scans")
        return self
