import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.users import schemas
from app.core.errors import ConflictError
from app.core.hashing import hash_password, verify_password
from app.core.security import generate_auth_token
from app.db.models.user import User


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, user: schemas.UserCreate) -> Tuple[User, str]:
    """Persist a new user with a fresh auth token. Returns the user and the token."""
    if get_user_by_email(db, user.email):
        raise ConflictError("Email already registered")

    new_user = User(
        email=user.email,
        hashed_password=hash_password(user.password),
    )
    db.add(new_user)
    try:
        # Flush first so the token is signed with the assigned id
        db.flush()
        token = generate_auth_token(new_user)
        db.commit()
    except IntegrityError:
        # Lost a race against another registration with the same email
        db.rollback()
        raise ConflictError("Email already registered")

    db.refresh(new_user)
    logging.info("Registered user: %s", new_user.email)
    return new_user, token


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    db_user = get_user_by_email(db, email)
    if not db_user or not verify_password(password, db_user.hashed_password):
        return None
    return db_user


def login(db: Session, credentials: schemas.UserLogin) -> Optional[Tuple[User, str]]:
    db_user = authenticate(db, credentials.email, credentials.password)
    if db_user is None:
        logging.info("Failed login for: %s", credentials.email)
        return None

    token = generate_auth_token(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user, token
