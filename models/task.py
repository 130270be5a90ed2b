from sqlalchemy import Column, String, Integer, Text
from db.database import Base


class Task(Base):
    __tablename__ = "tasks"

    # 列名は既存の tasks.db と互換のまま camelCase
    id = Column(Integer, primary_key=True, autoincrement=True)
    task = Column(Text)
    measure = Column(Text)
    target = Column(Integer)
    unit = Column(Text)
    assigned_to = Column("assignedTo", Text)
    status = Column(Text)  # pending / done など自由文字列
    assigned_by = Column("assignedBy", Text)
    assigned_time = Column("assignedTime", String)  # ISO-8601 文字列
