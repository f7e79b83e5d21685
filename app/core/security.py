import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Union

from fastapi import Depends
from fastapi.security import APIKeyHeader
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.config import settings
from app.core.errors import AuthenticationError
from app.db.session import get_db
from app.db.models.user import User, UserToken

AUTH_ACCESS = "auth"

# Used to extract the token from the auth header
auth_header_scheme = APIKeyHeader(name=settings.AUTH_HEADER, auto_error=False)


@dataclass
class Authenticated:
    user: User
    token: str


class Unauthenticated:
    pass


AuthResult = Union[Authenticated, Unauthenticated]


# 🔐 Create signed token
def create_access_token(data: dict) -> str:
    to_encode = data.copy()
    # jti keeps tokens issued within the same second distinct
    to_encode["jti"] = uuid.uuid4().hex
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def generate_auth_token(user: User) -> str:
    """Issue a new auth token and append it to the user's sessions.

    The caller owns the commit.
    """
    token = create_access_token({"_id": user.id, "access": AUTH_ACCESS})
    user.tokens.append(UserToken(access=AUTH_ACCESS, token=token))
    return token


def remove_token(db: Session, user: User, token: str) -> None:
    for user_token in list(user.tokens):
        if user_token.token == token:
            user.tokens.remove(user_token)
    db.commit()


# 👤 Resolve user from token
def find_by_token(db: Session, token: str) -> Optional[User]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logging.warning("Auth token rejected: %s", str(e))
        return None

    user_id = payload.get("_id")
    if not user_id or payload.get("access") != AUTH_ACCESS:
        logging.warning("Auth token missing '_id' or 'auth' access claim")
        return None

    user = (
        db.query(User)
        .join(User.tokens)
        .filter(
            User.id == user_id,
            UserToken.token == token,
            UserToken.access == AUTH_ACCESS,
        )
        .first()
    )
    if user is None:
        logging.warning("No active session for user id: %s", user_id)
    return user


def resolve_auth(
    token: Optional[str] = Depends(auth_header_scheme),
    db: Session = Depends(get_db),
) -> AuthResult:
    if not token:
        return Unauthenticated()

    user = find_by_token(db, token)
    if user is None:
        return Unauthenticated()
    return Authenticated(user=user, token=token)


def require_auth(auth: AuthResult = Depends(resolve_auth)) -> Authenticated:
    if not isinstance(auth, Authenticated):
        raise AuthenticationError()
    return auth


def get_current_user(auth: Authenticated = Depends(require_auth)) -> User:
    return auth.user


def get_optional_user(auth: AuthResult = Depends(resolve_auth)) -> Optional[User]:
    if isinstance(auth, Authenticated):
        return auth.user
    return None
