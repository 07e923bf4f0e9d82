from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from green.core.clock import Clock
from green.core.deps import CurrentUserId, get_clock, get_db
from green.schemas.task import TaskCompleted, TaskListItem, TaskRead
from green.services import task_engine

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskListItem])
async def list_tasks(
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
    view: str = Query("all", description="all, today, overdue, week or completed"),
):
    today = clock.today()
    tasks = await task_engine.list_tasks(db, user_id, today, view=view)
    return [TaskListItem.build(t, task_engine.date_label(t.due_date, today)) for t in tasks]


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: int, user_id: CurrentUserId, db: AsyncSession = Depends(get_db)):
    return await task_engine.get_owned_task(db, task_id, user_id)


@router.post("/{task_id}/complete", response_model=TaskCompleted)
async def complete_task(
    task_id: int,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    task, successor = await task_engine.complete_task(db, user_id, task_id, clock)
    return TaskCompleted(
        task=TaskRead.model_validate(task),
        successor=TaskRead.model_validate(successor) if successor is not None else None,
    )
