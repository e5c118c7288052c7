from sqlalchemy import Column, String, Text, Boolean, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base, generate_id
from app.utils.timeutil import utcnow


class Project(Base):
    __tablename__ = "projects"

    id              = Column(String(32), primary_key=True, default=generate_id)
    title           = Column(String(255), nullable=False)
    slug            = Column(String(255), unique=True, nullable=False, index=True)
    description     = Column(Text, nullable=True)
    content         = Column(Text, nullable=True)
    images          = Column(Text, default="[]", nullable=False)   # JSON: [url]
    thumbnail       = Column(String(500), nullable=True)
    categoryId      = Column(String(32), ForeignKey("categories.id"), nullable=True, index=True)
    # Free-text label, deliberately not a foreign key to vehicle_brands
    vehicleBrand    = Column(String(150), nullable=True)
    vehicleModel    = Column(String(150), nullable=True)
    year            = Column(String(10), nullable=True)
    featured        = Column(Boolean, default=False, nullable=False)
    published       = Column(Boolean, default=False, nullable=False)
    metaTitle       = Column(String(255), nullable=True)
    metaDescription = Column(Text, nullable=True)
    authorId        = Column(String(32), ForeignKey("users.id"), nullable=False)
    createdAt       = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updatedAt       = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(),
                             onupdate=utcnow, nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    category = relationship("Category", back_populates="projects")
    author   = relationship("User", back_populates="projects")

    def __repr__(self):
        return f"<Project id={self.id} slug={self.slug}>"
