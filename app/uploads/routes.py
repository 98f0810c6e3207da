from fastapi import APIRouter, UploadFile, File, Depends, Response, status
from sqlalchemy.orm import Session
from app.auth.deps import get_db, get_current_identity
from app.config import settings
from app.schemas.upload import UploadOut
from app.uploads import service
from app.uploads.storage import LocalStorage, get_storage
from app.utils.security import Identity


router = APIRouter(prefix="/uploads", tags=["uploads"])

@router.get("", response_model=list[UploadOut])
def list_uploads(db: Session = Depends(get_db), caller: Identity = Depends(get_current_identity)):
    return service.list_uploads(db, caller)

@router.post("", response_model=UploadOut, status_code=status.HTTP_201_CREATED)
def create_upload(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: LocalStorage = Depends(get_storage),
    caller: Identity = Depends(get_current_identity),
):
    # sync: extraction blocks, so this runs in the threadpool
    data = file.file.read()
    return service.create_upload(
        db, storage, caller,
        filename=file.filename or "",
        content_type=file.content_type,
        data=data,
        max_kb=settings.upload_max_kb,
    )

@router.get("/{upload_id}", response_model=UploadOut)
def get_upload(upload_id: int, db: Session = Depends(get_db), caller: Identity = Depends(get_current_identity)):
    return service.get_upload(db, caller, upload_id)

@router.delete("/{upload_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_upload(
    upload_id: int,
    db: Session = Depends(get_db),
    storage: LocalStorage = Depends(get_storage),
    caller: Identity = Depends(get_current_identity),
):
    service.delete_upload(db, storage, caller, upload_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
