# services/exceptions.py
from fastapi import status


class ServiceError(Exception):
    """
    サービス層のエラー基底クラス
    main.py の例外ハンドラで {"error": message} + status_code に変換される
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """必須項目の欠落など"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ConflictError(ServiceError):
    """ユーザー名の重複（登録時の INSERT 失敗全般）"""
    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(ServiceError):
    """DB 側の失敗。メッセージはドライバのエラー文言"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
