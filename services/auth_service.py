# services/auth_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from auth.passwords import hash_password, verify_password
from models.user import User
from schemas.user import LoginRequest, RegisterRequest, UserResponse
from services.exceptions import (
    AuthenticationError,
    ConflictError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# ユーザーが存在しない場合もパスワード違いも同じ文言（ユーザー名の列挙対策）
INVALID_CREDENTIALS = "Invalid username or password"
USERNAME_TAKEN = "Username already exists"


def login(data: LoginRequest, db: Session) -> UserResponse:
    """
    ユーザー名完全一致で検索し、bcrypt でパスワードを照合する

    Raises:
        AuthenticationError: 認証失敗（理由は区別しない）
        StorageError: 検索自体が失敗した（認証失敗とは別扱いで 500）
    """
    if not data.username or not data.password:
        raise AuthenticationError(INVALID_CREDENTIALS)

    try:
        user = db.query(User).filter(User.username == data.username).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Login lookup failed: %s", e)
        raise StorageError(str(getattr(e, "orig", None) or e))

    if user is None or not verify_password(data.password, user.password):
        logger.warning("Failed login for username=%r", data.username)
        raise AuthenticationError(INVALID_CREDENTIALS)

    return UserResponse.model_validate(user)


def register(data: RegisterRequest, db: Session) -> UserResponse:
    """
    パスワードを bcrypt でハッシュ化してユーザーを作成する

    INSERT の失敗はすべて「ユーザー名重複」として返す
    （NOT NULL 違反など他の理由も区別しない）
    """
    if not data.password:
        raise ValidationError("Password is required")

    try:
        hashed = hash_password(data.password)
    except ValueError as e:
        # bcrypt は 72 バイトを超えるパスワードを受け付けない
        raise ValidationError(str(e))

    user = User(username=data.username, password=hashed, role=data.role)
    try:
        db.add(user)
        db.flush()
        user_id = user.id
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Registration rejected for username=%r: %s", data.username, e)
        raise ConflictError(USERNAME_TAKEN)

    logger.info("Registered user id=%s username=%r role=%r", user_id, data.username, data.role)
    return UserResponse(id=user_id, username=data.username, role=data.role)
