from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from farmstead.core.deps import CurrentUser, StorageDep
from farmstead.models.farm import Task
from farmstead.schemas.task import TaskCreate, TaskRead, TaskStatus, TaskUpdate
from farmstead.services.status import local_today
from farmstead.storage import Storage

router = APIRouter(prefix="/tasks", tags=["tasks"])


async def _get_owned_task(storage: Storage, task_id: int, user_id: int) -> Task:
    task = await storage.get_task(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    if task.user_id != user_id:
        raise HTTPException(status_code=403, detail="Not your task")
    return task


@router.get("", response_model=list[TaskRead])
async def list_tasks(
    current_user: CurrentUser,
    storage: StorageDep,
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
):
    tasks = await storage.list_tasks(current_user.id)
    if status_filter is not None:
        tasks = [t for t in tasks if t.status == status_filter]
    return tasks


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(data: TaskCreate, current_user: CurrentUser, storage: StorageDep):
    return await storage.create_task(current_user.id, data, today=local_today(current_user.timezone))


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: int, current_user: CurrentUser, storage: StorageDep):
    return await _get_owned_task(storage, task_id, current_user.id)


@router.patch("/{task_id}", response_model=TaskRead)
async def update_task(task_id: int, data: TaskUpdate, current_user: CurrentUser, storage: StorageDep):
    await _get_owned_task(storage, task_id, current_user.id)
    task = await storage.update_task(task_id, data, today=local_today(current_user.timezone))
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, current_user: CurrentUser, storage: StorageDep):
    await _get_owned_task(storage, task_id, current_user.id)
    await storage.delete_task(task_id)
