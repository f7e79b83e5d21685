from sqlalchemy import Column, String, Boolean, ForeignKey, BigInteger, DateTime
from sqlalchemy.orm import relationship
from app.core.clock import utcnow
from app.db.session import Base
from app.db.ids import new_id


class Todo(Base):
    __tablename__ = "todos"

    id = Column(String(32), primary_key=True, default=new_id)
    text = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(BigInteger, nullable=True)     # epoch millis, set only while completed
    creator_id = Column(String(32), ForeignKey("users.id"), nullable=True)

    # Set in Python for sub-second resolution, listing orders by it
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    creator = relationship("User", back_populates="todos")
