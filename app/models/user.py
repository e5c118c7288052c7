import enum
from sqlalchemy import Column, String, Enum, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base, generate_id
from app.utils.timeutil import utcnow


class RoleName(str, enum.Enum):
    ADMIN  = "ADMIN"
    EDITOR = "EDITOR"


class User(Base):
    __tablename__ = "users"

    id        = Column(String(32), primary_key=True, default=generate_id)
    email     = Column(String(255), unique=True, nullable=False, index=True)
    password  = Column(String(255), nullable=False)
    name      = Column(String(150), nullable=True)
    role      = Column(Enum(RoleName), default=RoleName.ADMIN, nullable=False)
    createdAt = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updatedAt = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(),
                       onupdate=utcnow, nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    projects = relationship("Project", back_populates="author")

    def __repr__(self):
        return f"<User id={self.id} email={self.email} role={self.role}>"
