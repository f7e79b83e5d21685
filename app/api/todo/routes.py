from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.todo import schemas, services
from app.core.errors import NotFoundError
from app.core.security import get_optional_user
from app.db.models.user import User
from app.db.session import get_db

router = APIRouter()

@router.post("", response_model=schemas.TodoOut)
def create_todo(
    todo: schemas.TodoCreate,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user)
):
    creator_id = current_user.id if current_user else None
    return services.create_todo(db, todo, creator_id)

@router.get("", response_model=schemas.TodoList)
def list_todos(db: Session = Depends(get_db)):
    return {"todos": services.get_todos(db)}

@router.get("/{todo_id}", response_model=schemas.TodoEnvelope)
def get_todo(todo_id: str, db: Session = Depends(get_db)):
    todo = services.get_todo(db, todo_id)
    if not todo:
        raise NotFoundError("Todo not found")
    return {"todo": todo}

@router.patch("/{todo_id}", response_model=schemas.TodoEnvelope)
def update_todo(todo_id: str, todo: schemas.TodoUpdate, db: Session = Depends(get_db)):
    updated = services.update_todo(db, todo_id, todo)
    if not updated:
        raise NotFoundError("Todo not found")
    return {"todo": updated}

@router.delete("/{todo_id}", response_model=schemas.TodoEnvelope)
def delete_todo(todo_id: str, db: Session = Depends(get_db)):
    deleted = services.delete_todo(db, todo_id)
    if not deleted:
        raise NotFoundError("Todo not found")
    return {"todo": deleted}
