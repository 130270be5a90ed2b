from sqlalchemy import Column, String, Integer, Text
from db.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt ハッシュ（平文は保存しない）
    role = Column(Text, nullable=False)  # admin / worker など

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
