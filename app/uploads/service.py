
import logging
import os
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.auth.guard import ensure_allowed, scope_to_caller
from app.errors import FieldValidationError
from app.models.upload import Upload
from app.uploads.extraction import extract_text
from app.uploads.storage import LocalStorage
from app.utils.security import Identity

logger = logging.getLogger(__name__)

ALLOWED_TYPES = {
    "pdf": {"application/pdf"},
    "jpg": {"image/jpeg"},
    "jpeg": {"image/jpeg"},
    "png": {"image/png"},
}

def _extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lstrip(".").lower()

def validate_file(filename: str, content_type: str | None, size: int, max_kb: int) -> str:
    ext = _extension(filename)
    allowed = ALLOWED_TYPES.get(ext)
    if allowed is None or (content_type or "").lower() not in allowed:
        raise FieldValidationError({"file": ["The file must be a file of type: pdf, jpg, jpeg, png."]})
    if size > max_kb * 1024:
        raise FieldValidationError({"file": [f"The file must not be greater than {max_kb} kilobytes."]})
    return ext

def classify(ext: str) -> str:
    return "pdf" if ext == "pdf" else "image"

def _get_upload(db: Session, upload_id: int) -> Upload:
    upload = db.get(Upload, upload_id)
    if upload is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Upload not found")
    return upload

def list_uploads(db: Session, caller: Identity) -> list[Upload]:
    query = scope_to_caller(db.query(Upload), Upload.user_id, caller)
    return query.order_by(Upload.created_at.desc(), Upload.id.desc()).all()

def get_upload(db: Session, caller: Identity, upload_id: int) -> Upload:
    upload = _get_upload(db, upload_id)
    ensure_allowed(caller, upload.user_id, "upload", upload.id)
    return upload

def create_upload(
    db: Session,
    storage: LocalStorage,
    caller: Identity,
    filename: str,
    content_type: str | None,
    data: bytes,
    max_kb: int,
) -> Upload:
    ext = validate_file(filename, content_type, len(data), max_kb)
    file_type = classify(ext)

    # the stored file must survive a failed extraction
    path = storage.store(data, ext)
    extracted = extract_text(storage.path(path), file_type)

    upload = Upload(
        user_id=caller.id,
        original_filename=os.path.basename(filename),
        file_path=path,
        file_type=file_type,
        extracted_text=extracted,
    )
    db.add(upload); db.commit(); db.refresh(upload)
    return upload

def delete_upload(db: Session, storage: LocalStorage, caller: Identity, upload_id: int) -> None:
    upload = _get_upload(db, upload_id)
    ensure_allowed(caller, upload.user_id, "upload", upload.id)

    path = upload.file_path
    db.delete(upload)
    db.commit()

    try:
        storage.delete(path)
    except (OSError, ValueError):
        logger.warning("stored file %s could not be removed", path, exc_info=True)
