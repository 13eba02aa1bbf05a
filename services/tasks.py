import logging
from typing import List, Optional

from errors import NotFound
from models import Task, TaskStatus, User, utc_now
from stores.tasks import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations on behalf of a single authenticated user"""

    def __init__(self, tasks: TaskStore, user: User):
        self.tasks = tasks
        self.user = user

    def list_tasks(self, status: Optional[TaskStatus] = None, search: Optional[str] = None) -> List[Task]:
        return self.tasks.list(self.user.id, status=status, search=search)

    def create_task(self, title: str, description: str) -> Task:
        task = Task(
            user_id=self.user.id,
            title=title.strip(),
            description=description.strip(),
            status=TaskStatus.OPEN,
        )
        task = self.tasks.save(task)
        logger.info("User %s created task %s", self.user.id, task.id)
        return task

    def get_task(self, task_id: str) -> Task:
        # Tasks owned by other users are reported exactly like missing ones
        task = self.tasks.get(self.user.id, task_id)
        if task is None:
            raise NotFound()
        return task

    def update_task_status(self, task_id: str, status: TaskStatus) -> Task:
        task = self.get_task(task_id)
        task.status = status
        task.updated_at = utc_now()
        task = self.tasks.save(task)
        logger.info("User %s set task %s to %s", self.user.id, task.id, status.value)
        return task

    def delete_task(self, task_id: str) -> None:
        task = self.get_task(task_id)
        self.tasks.delete(task)
        logger.info("User %s deleted task %s", self.user.id, task_id)
