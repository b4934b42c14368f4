from fastapi import APIRouter, Depends, UploadFile, File, HTTPException, Request
from ptxkit.core.config import ReaderConfig
from ptxkit.core.exceptions import PtxError
from ptxkit.core.scan_summary import summarize_ptx
from ptxkit.core.storage import get_upload_file_path, remove_upload_file, save_upload_file
from ptxkit.models.summary import PtxSummary
import pathlib
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

SUPPORTED_FORMATS = [".ptx"]


def validate_file_format(filename: str) -> bool:
    """Validates if the file has a supported extension."""
    return pathlib.Path(filename).suffix.lower() in SUPPORTED_FORMATS


def get_reader_config(request: Request) -> ReaderConfig:
    """Dependency returning the reader options loaded at startup"""
    return request.app.state.settings.reader


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/scans/summary", response_model=PtxSummary)
def summarize_upload(
    ptx_file: UploadFile = File(..., description="PTX point cloud file"),
    reader_config: ReaderConfig = Depends(get_reader_config),
):
    """
    Accepts a PTX file, streams all of its scans and returns the per-scan
    dimensions, registration and sampled/unsampled point counts.
    """
    filename = ptx_file.filename or "upload.ptx"
    if not validate_file_format(filename):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file format: {filename}. Supported: {', '.join(SUPPORTED_FORMATS)}",
        )

    upload_path = get_upload_file_path(filename)
    try:
        save_upload_file(ptx_file, upload_path)
        summary = summarize_ptx(upload_path, config=reader_config)
        return summary.model_copy(update={"filename": pathlib.Path(filename).name})
    except PtxError as e:
        logger.error(f"Invalid PTX upload {filename}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=422, detail=str(e))
    finally:
        remove_upload_file(upload_path)
