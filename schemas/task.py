# schemas/task.py
from pydantic import BaseModel, Field
from typing import Optional


class TaskBase(BaseModel):
    """
    JSON では camelCase（assignedTo など）、Python 側は snake_case で扱う
    """
    task: Optional[str] = None
    measure: Optional[str] = None
    # SQLite INTEGER は 64bit 符号付き
    target: Optional[int] = Field(None, ge=-(2**63), le=2**63 - 1)
    unit: Optional[str] = None
    assigned_to: Optional[str] = Field(None, alias="assignedTo")
    status: Optional[str] = None
    assigned_by: Optional[str] = Field(None, alias="assignedBy")

    class Config:
        populate_by_name = True


class TaskCreate(TaskBase):
    # assignedTime はサーバー側で付与するので受け取らない
    pass


class TaskUpdate(TaskBase):
    assigned_time: Optional[str] = Field(None, alias="assignedTime")


class TaskResponse(TaskBase):
    id: int
    assigned_time: Optional[str] = Field(None, alias="assignedTime")

    class Config:
        populate_by_name = True
        from_attributes = True  # pydantic v2


class TaskDeleteResponse(BaseModel):
    deleted: bool
