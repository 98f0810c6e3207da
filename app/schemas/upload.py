
from datetime import datetime
from pydantic import BaseModel

class UploadOut(BaseModel):
    id: int
    user_id: int
    original_filename: str
    file_path: str
    file_type: str
    extracted_text: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
