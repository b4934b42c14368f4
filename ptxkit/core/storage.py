import os
import shutil
import logging
import uuid
from fastapi import UploadFile

# Configure logging
logger = logging.getLogger(__name__)

# Base directory for uploaded PTX files, configurable via environment
UPLOAD_DIR_ENV_VAR = "PTX_UPLOAD_DIR"


def get_upload_dir() -> str:
    """Returns the upload directory, creating it if needed."""
    upload_dir = os.environ.get(UPLOAD_DIR_ENV_VAR, "uploads")
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


def get_upload_file_path(filename: str) -> str:
    """Returns a unique path in the upload directory for an uploaded file."""
    safe_name = os.path.basename(filename) or "upload.ptx"
    return os.path.join(get_upload_dir(), f"{uuid.uuid4()}_{safe_name}")


def save_upload_file(upload_file: UploadFile, destination: str) -> None:
    """Saves an uploaded file to the specified destination."""
    try:
        with open(destination, "wb") as buffer:
            shutil.copyfileobj(upload_file.file, buffer)
    finally:
        upload_file.file.close()
    logger.info(f"Saved upload {upload_file.filename} to {destination}")


def remove_upload_file(path: str) -> None:
    """Deletes a stored upload, ignoring files that are already gone."""
    try:
        os.remove(path)
    except FileNotFoundError:
        logger.debug(f"Upload {path} already removed")
