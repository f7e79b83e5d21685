from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.ids import new_id

class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    # Active sessions, oldest first
    tokens = relationship(
        "UserToken",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserToken.id",
    )
    todos = relationship("Todo", back_populates="creator")


class UserToken(Base):
    __tablename__ = "user_tokens"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    access = Column(String, nullable=False, default="auth")
    token = Column(String, nullable=False, index=True)

    user = relationship("User", back_populates="tokens")
