from sqlalchemy.orm import Session
from app.db.models.todo import Todo
from app.db.models.user import User
from app.core.clock import now_millis


DUMMY_TODOS = [
    ("Fix login issue", False),
    ("Plan Q3 roadmap", True),
    ("Buy groceries", False),
    ("Pay bills", True),
    ("Research AI tools", False),
    ("Email HR", False),
    ("Clean garage", False),
    ("Read a book", True),
]


def seed_dummy_todos(db: Session, user: User):
    # ✅ Create Todos owned by the user
    todos = [
        Todo(
            text=text,
            completed=completed,
            completed_at=now_millis() if completed else None,
            creator_id=user.id,
        )
        for text, completed in DUMMY_TODOS
    ]
    db.add_all(todos)
    db.commit()
    print(f"[INFO] - Seeded {len(todos)} todos for {user.email}.")
    return todos
