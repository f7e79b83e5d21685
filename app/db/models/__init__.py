# app/db/models/__init__.py
from .user import User, UserToken
from .todo import Todo
