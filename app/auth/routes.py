
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from app.auth.deps import get_db
from app.schemas.auth import RegisterIn, LoginIn, RegisterOut, LoginOut, UserOut
from app.auth.service import register_user, authenticate, issue_token

router = APIRouter(tags=["auth"])

# the body is validated in the service so uniqueness errors join the schema errors
@router.post(
    "/register",
    response_model=RegisterOut,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": RegisterIn.model_json_schema()}}}},
)
def register(payload: dict = Body(...), db: Session = Depends(get_db)):
    user = register_user(db, payload)
    return RegisterOut(user=UserOut.model_validate(user), token=issue_token(user))

@router.post("/login", response_model=LoginOut)
def login(body: LoginIn, db: Session = Depends(get_db)):
    user = authenticate(db, body.email, body.password)
    return LoginOut(token=issue_token(user), user=UserOut.model_validate(user))
