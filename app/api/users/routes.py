from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.api.users import schemas, services
from app.config import settings
from app.core.errors import ValidationError
from app.core.security import Authenticated, get_current_user, remove_token, require_auth
from app.db.models.user import User
from app.db.session import get_db

router = APIRouter()


@router.post("", response_model=schemas.UserOut)
def register(user: schemas.UserCreate, response: Response, db: Session = Depends(get_db)):
    new_user, token = services.create_user(db, user)
    response.headers[settings.AUTH_HEADER] = token
    return new_user


@router.post("/login", response_model=schemas.UserOut)
def login(credentials: schemas.UserLogin, response: Response, db: Session = Depends(get_db)):
    result = services.login(db, credentials)
    if result is None:
        # Same answer for unknown email and wrong password
        raise ValidationError("credentials", "Invalid email or password")
    db_user, token = result
    response.headers[settings.AUTH_HEADER] = token
    return db_user


@router.get("/me", response_model=schemas.UserOut)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.delete("/me/token")
def logout(auth: Authenticated = Depends(require_auth), db: Session = Depends(get_db)):
    remove_token(db, auth.user, auth.token)
    return {}
