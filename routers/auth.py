from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db.database import get_db
from schemas.error import ErrorResponse
from schemas.user import LoginRequest, RegisterRequest, UserResponse
from services import auth_service

router = APIRouter(
    prefix="/api",
    tags=["Auth"],
)


@router.post(
    "/login",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    ユーザー名とパスワードを照合し、id / username / role を返す
    （トークンやセッションは発行しない）
    """
    return auth_service.login(data, db)


@router.post("/register", response_model=UserResponse, responses={400: {"model": ErrorResponse}})
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    return auth_service.register(data, db)
