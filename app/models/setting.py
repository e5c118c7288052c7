from sqlalchemy import Column, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from app.database import Base, generate_id
from app.utils.timeutil import utcnow


class Setting(Base):
    """Site-wide key/value configuration (site name, contact details)."""
    __tablename__ = "settings"

    id        = Column(String(32), primary_key=True, default=generate_id)
    key       = Column(String(100), unique=True, nullable=False, index=True)
    value     = Column(Text, nullable=False, default="")
    updatedAt = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(),
                       onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Setting key={self.key}>"
