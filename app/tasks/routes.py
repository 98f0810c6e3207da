
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.auth.deps import get_db, get_current_identity
from app.schemas.task import TaskCreate, TaskUpdate, TaskOut
from app.tasks import service
from app.utils.security import Identity

router = APIRouter(prefix="/tasks", tags=["tasks"])

@router.get("", response_model=list[TaskOut])
def list_tasks(db: Session = Depends(get_db), caller: Identity = Depends(get_current_identity)):
    return service.list_tasks(db, caller)

@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(body: TaskCreate, db: Session = Depends(get_db), caller: Identity = Depends(get_current_identity)):
    return service.create_task(db, caller, body)

@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: int, db: Session = Depends(get_db), caller: Identity = Depends(get_current_identity)):
    return service.get_task(db, caller, task_id)

@router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: int, body: TaskUpdate, db: Session = Depends(get_db), caller: Identity = Depends(get_current_identity)):
    return service.update_task(db, caller, task_id, body)

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db), caller: Identity = Depends(get_current_identity)):
    service.delete_task(db, caller, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
