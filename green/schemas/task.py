from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel

from green.core.exceptions import format_due_date


class TaskRead(BaseModel):
    id: int
    user_id: str
    planting_id: int
    garden_id: int
    task_type: Literal["water", "harvest", "pestCheck", "general"]
    due_date: Optional[date]
    status: Literal["pending", "completed"]
    completed_at: Optional[datetime] = None
    details: str
    related_plant_name: Optional[str] = None
    related_area_id: Optional[int] = None
    recurring: bool
    recurring_days: Optional[int] = None
    notification_sent: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class TaskListItem(TaskRead):
    date_label: str
    due_date_display: Optional[str] = None

    @classmethod
    def build(cls, task, label: str) -> "TaskListItem":
        data = TaskRead.model_validate(task).model_dump()
        return cls(
            **data,
            date_label=label,
            due_date_display=format_due_date(task.due_date) if task.due_date else None,
        )


class TaskCompleted(BaseModel):
    task: TaskRead
    successor: Optional[TaskRead] = None
