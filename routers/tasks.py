# routers/tasks.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from db.database import get_db

from schemas.task import TaskCreate, TaskUpdate, TaskResponse, TaskDeleteResponse
from schemas.error import ErrorResponse
from services import task_service

from typing import List

router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=List[TaskResponse])
def get_tasks(db: Session = Depends(get_db)):
    return task_service.list_tasks(db)


@router.post("", response_model=TaskResponse, responses={400: {"model": ErrorResponse}})
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    return task_service.create_task(task, db)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """
    全項目の置き換え（送らなかった項目は null になる）
    """
    return task_service.update_task(task_id, task_update, db)


@router.delete("/{task_id}", response_model=TaskDeleteResponse)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    task_service.delete_task(task_id, db)
    return {"deleted": True}
