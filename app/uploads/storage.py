import os
import uuid

from app.config import settings

class LocalStorage:
    """Stores uploaded bytes under `root` at generated relative paths."""

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def path(self, relative: str) -> str:
        full = os.path.abspath(os.path.join(self.root, relative))
        if os.path.commonpath([full, self.root]) != self.root:
            raise ValueError(f"path escapes storage root: {relative}")
        return full

    def store(self, data: bytes, extension: str, folder: str = "uploads") -> str:
        relative = f"{folder}/{uuid.uuid4().hex}.{extension}"
        full = self.path(relative)
        os.makedirs(os.path.dirname(full), exist_ok=True)
        with open(full, "wb") as f:
            f.write(data)
        return relative

    def delete(self, relative: str) -> None:
        os.remove(self.path(relative))

def get_storage() -> LocalStorage:
    return LocalStorage(settings.upload_dir)
