from typing import Optional

from sqlalchemy.orm import Session

from app.core.clock import now_millis
from app.db.ids import is_valid_id
from app.db.models.todo import Todo
from app.api.todo import schemas


def create_todo(db: Session, todo: schemas.TodoCreate, creator_id: Optional[str] = None):
    db_todo = Todo(text=todo.text, completed=False, completed_at=None, creator_id=creator_id)
    db.add(db_todo)
    db.commit()
    db.refresh(db_todo)
    return db_todo

def get_todos(db: Session):
    return db.query(Todo).order_by(Todo.created_at, Todo.id).all()

def get_todo(db: Session, todo_id: str):
    # Malformed ids can never match a record
    if not is_valid_id(todo_id):
        return None
    return db.query(Todo).filter(Todo.id == todo_id).first()

def update_todo(db: Session, todo_id: str, todo: schemas.TodoUpdate):
    db_todo = get_todo(db, todo_id)
    if not db_todo:
        return None

    changes = todo.model_dump(exclude_unset=True)
    if changes.get("text") is not None:
        db_todo.text = changes["text"]

    completed = changes.get("completed")
    if completed is True:
        # Keep the original timestamp of an already completed todo
        if not (db_todo.completed and db_todo.completed_at is not None):
            db_todo.completed_at = now_millis()
        db_todo.completed = True
    elif completed is False:
        db_todo.completed = False
        db_todo.completed_at = None

    db.commit()
    db.refresh(db_todo)
    return db_todo

def delete_todo(db: Session, todo_id: str):
    db_todo = get_todo(db, todo_id)
    if not db_todo:
        return None
    deleted = schemas.TodoOut.model_validate(db_todo)
    db.delete(db_todo)
    db.commit()
    return deleted
