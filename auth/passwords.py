# auth/passwords.py
import os

import bcrypt
from dotenv import load_dotenv

load_dotenv()

# bcrypt のコスト（2^rounds 回）。元サーバーと同じ 10 がデフォルト
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))


def hash_password(password: str) -> str:
    """ソルト付き bcrypt ハッシュを文字列で返す"""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    bcrypt.checkpw は定数時間比較
    保存値が壊れている（bcrypt 形式でない）場合も False 扱い
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
