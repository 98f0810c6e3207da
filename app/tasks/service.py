
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.auth.guard import ensure_allowed, scope_to_caller
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskUpdate
from app.utils.security import Identity

def _get_task(db: Session, task_id: int) -> Task:
    task = db.get(Task, task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task

def list_tasks(db: Session, caller: Identity) -> list[Task]:
    query = scope_to_caller(db.query(Task), Task.user_id, caller)
    return query.order_by(Task.created_at.desc(), Task.id.desc()).all()

def create_task(db: Session, caller: Identity, body: TaskCreate) -> Task:
    task = Task(
        user_id=caller.id,
        title=body.title,
        description=body.description,
        status=body.status or "pending",
    )
    db.add(task); db.commit(); db.refresh(task)
    return task

def get_task(db: Session, caller: Identity, task_id: int) -> Task:
    task = _get_task(db, task_id)
    ensure_allowed(caller, task.user_id, "task", task.id)
    return task

def update_task(db: Session, caller: Identity, task_id: int, body: TaskUpdate) -> Task:
    task = _get_task(db, task_id)
    ensure_allowed(caller, task.user_id, "task", task.id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(task, field, value)
    db.commit(); db.refresh(task)
    return task

def delete_task(db: Session, caller: Identity, task_id: int) -> None:
    task = _get_task(db, task_id)
    ensure_allowed(caller, task.user_id, "task", task.id)
    db.delete(task)
    db.commit()
