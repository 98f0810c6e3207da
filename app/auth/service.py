
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from pydantic import ValidationError
from app.config import settings
from app.errors import FieldValidationError, field_errors
from app.models.user import User, ROLE_USER
from app.schemas.auth import RegisterIn
from app.utils.security import hash_password, verify_password, create_access_token

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_TAKEN = "This email address is already registered."

def _email_taken() -> FieldValidationError:
    return FieldValidationError({"email": [EMAIL_TAKEN]})

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()

def validate_registration(db: Session, payload: dict) -> RegisterIn:
    """Schema rules and email uniqueness, reported together."""
    body = None
    errors: dict[str, list[str]] = {}
    try:
        body = RegisterIn.model_validate(payload)
    except ValidationError as exc:
        errors = field_errors(exc.errors())

    if "email" not in errors:
        email = body.email if body is not None else payload.get("email")
        if isinstance(email, str) and get_user_by_email(db, email.strip()):
            errors["email"] = [EMAIL_TAKEN]

    if errors:
        raise FieldValidationError(errors)
    return body

def register_user(db: Session, payload: dict) -> User:
    body = validate_registration(db, payload)

    role = body.role
    if not settings.allow_role_self_assignment:
        role = ROLE_USER

    user = User(name=body.name, email=body.email, password_hash=hash_password(body.password), role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise _email_taken()
    db.refresh(user)
    logger.info("registered user %s", user.id)
    return user

def authenticate(db: Session, email: str, password: str) -> User:
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("login rejected")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
    return user

def issue_token(user: User) -> str:
    return create_access_token(user.id, user.role)
