from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from app.db.session import SessionLocal
from app.errors import UNAUTHENTICATED
from app.utils.security import Identity, InvalidToken, decode_token
from app.models.user import User

# missing credentials become our own 401 instead of FastAPI's 403
security = HTTPBearer(auto_error=False)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED,
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise _unauthenticated()

    try:
        claimed = decode_token(credentials.credentials)
    except InvalidToken:
        raise _unauthenticated()

    user = db.get(User, claimed.id)
    if user is None:
        raise _unauthenticated()

    return Identity(id=user.id, role=user.role)
