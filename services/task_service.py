# services/task_service.py
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.task import Task
from schemas.task import TaskCreate, TaskUpdate, TaskResponse
from services.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)

# 作成時に必須の項目（target は任意。無ければ NULL で保存）
REQUIRED_ON_CREATE = [
    ("task", "task"),
    ("measure", "measure"),
    ("unit", "unit"),
    ("assigned_to", "assignedTo"),
    ("assigned_by", "assignedBy"),
    ("status", "status"),
]


def now_iso() -> str:
    """
    現在の UTC 時刻を ISO-8601（ミリ秒 + Z）で返す
    例: 2025-01-31T09:15:00.123Z
    """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _storage_error(db: Session, exc: SQLAlchemyError) -> StorageError:
    db.rollback()
    logger.error("Storage failure: %s", exc)
    return StorageError(str(getattr(exc, "orig", None) or exc))


def _missing_fields(data: TaskCreate) -> List[str]:
    missing = []
    for attr, wire_name in REQUIRED_ON_CREATE:
        value = getattr(data, attr)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(wire_name)
    return missing


def list_tasks(db: Session) -> List[Task]:
    """全タスクを登録順（id 昇順）で返す"""
    try:
        return db.query(Task).order_by(Task.id).all()
    except SQLAlchemyError as e:
        raise _storage_error(db, e)


def create_task(data: TaskCreate, db: Session) -> TaskResponse:
    """
    タスクを 1 件作成する

    Args:
        data: リクエストボディ
        db: データベースセッション

    Returns:
        TaskResponse: 採番された id とサーバー側で付けた assignedTime を含む

    Raises:
        ValidationError: 必須項目が欠けている（行は作られない）
        StorageError: INSERT に失敗した
    """
    missing = _missing_fields(data)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    # クライアントから何が来ても assignedTime はここで決める
    assigned_time = now_iso()
    new_task = Task(
        task=data.task,
        measure=data.measure,
        target=data.target,
        unit=data.unit,
        assigned_to=data.assigned_to,
        assigned_by=data.assigned_by,
        assigned_time=assigned_time,
        status=data.status,
    )
    try:
        db.add(new_task)
        db.flush()
        task_id = new_task.id
        db.commit()
    except SQLAlchemyError as e:
        raise _storage_error(db, e)

    logger.info("Created task id=%s assignedTo=%s", task_id, data.assigned_to)
    return TaskResponse(id=task_id, assigned_time=assigned_time, **data.model_dump())


def update_task(task_id: int, data: TaskUpdate, db: Session) -> TaskResponse:
    """
    全項目を上書きする（部分更新ではない。送られなかった項目は NULL になる）
    assignedTime もクライアントの値をそのまま使う

    存在しない id の場合は 0 行更新で終わり、送られた内容をそのまま返す
    """
    try:
        affected = db.query(Task).filter(Task.id == task_id).update(
            {
                Task.task: data.task,
                Task.measure: data.measure,
                Task.target: data.target,
                Task.unit: data.unit,
                Task.assigned_to: data.assigned_to,
                Task.status: data.status,
                Task.assigned_by: data.assigned_by,
                Task.assigned_time: data.assigned_time,
            },
            synchronize_session=False,
        )
        db.commit()
    except SQLAlchemyError as e:
        raise _storage_error(db, e)

    if affected == 0:
        logger.debug("Update of task id=%s matched no rows", task_id)
    return TaskResponse(id=task_id, **data.model_dump())


def delete_task(task_id: int, db: Session) -> int:
    """削除した行数を返す（存在しない id でも 0 を返すだけでエラーにはしない）"""
    try:
        affected = db.query(Task).filter(Task.id == task_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        raise _storage_error(db, e)

    if affected == 0:
        logger.debug("Delete of task id=%s matched no rows", task_id)
    return affected
