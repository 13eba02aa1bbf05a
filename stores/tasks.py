import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, or_, select

from errors import StorageUnavailable
from models import Task, TaskStatus

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class TaskStore:
    """Task store backed by the tasks table; every lookup takes the owner id"""

    def __init__(self, session: Session):
        self.session = session

    def list(
        self,
        user_id: str,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None,
    ) -> List[Task]:
        # Build query
        query = select(Task).where(Task.user_id == user_id)

        if status is not None:
            query = query.where(Task.status == status)

        if search:
            pattern = f"%{_escape_like(search)}%"
            query = query.where(
                or_(
                    col(Task.title).ilike(pattern, escape="\\"),
                    col(Task.description).ilike(pattern, escape="\\"),
                )
            )

        query = query.order_by(col(Task.created_at), col(Task.id))

        try:
            return list(self.session.exec(query).all())
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to list tasks for user %s", user_id)
            raise StorageUnavailable() from exc

    def get(self, user_id: str, task_id: str) -> Optional[Task]:
        query = select(Task).where(Task.id == task_id, Task.user_id == user_id)
        try:
            return self.session.exec(query).first()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to load task %s", task_id)
            raise StorageUnavailable() from exc

    def save(self, task: Task) -> Task:
        """Insert or update a task and return the refreshed row"""
        task_id = task.id
        try:
            self.session.add(task)
            self.session.commit()
            self.session.refresh(task)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to save task %s", task_id)
            raise StorageUnavailable() from exc

        return task

    def delete(self, task: Task) -> None:
        task_id = task.id
        try:
            self.session.delete(task)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to delete task %s", task_id)
            raise StorageUnavailable() from exc
