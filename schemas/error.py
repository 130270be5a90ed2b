from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """全エラーレスポンス共通の形 {"error": "..."}"""
    error: str
