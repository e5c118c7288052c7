from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP
from sqlalchemy.sql import func
from app.database import Base, generate_id
from app.utils.timeutil import utcnow


class ContactMessage(Base):
    """Visitor inquiry from the public contact form. Append-only apart from the read flag."""
    __tablename__ = "contact_messages"

    id        = Column(String(32), primary_key=True, default=generate_id)
    name      = Column(String(150), nullable=False)
    email     = Column(String(255), nullable=False)
    phone     = Column(String(50), nullable=True)
    subject   = Column(String(255), nullable=True)
    message   = Column(Text, nullable=False)
    read      = Column(Boolean, default=False, nullable=False, index=True)
    createdAt = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<ContactMessage id={self.id} email={self.email} read={self.read}>"
