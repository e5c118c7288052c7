from sqlalchemy import Column, Integer, String, Text, Boolean, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base, generate_id
from app.utils.timeutil import utcnow

DEFAULT_COLOR = "#3b82f6"


class Category(Base):
    __tablename__ = "categories"

    id                 = Column(String(32), primary_key=True, default=generate_id)
    name               = Column(String(150), nullable=False)
    slug               = Column(String(150), unique=True, nullable=False, index=True)
    description        = Column(Text, nullable=True)
    longDescription    = Column(Text, nullable=True)
    contentDescription = Column(Text, nullable=True)
    icon               = Column(String(100), nullable=True)
    color              = Column(String(20), default=DEFAULT_COLOR, nullable=True)
    features           = Column(Text, default="[]", nullable=False)   # JSON: [str]
    benefits           = Column(Text, default="[]", nullable=False)   # JSON: [str]
    specifications     = Column(Text, default="[]", nullable=False)   # JSON: [{label, value}]
    image              = Column(String(500), nullable=True)
    heroImage          = Column(String(500), nullable=True)
    gallery            = Column(Text, default="[]", nullable=False)
    metaTitle          = Column(String(255), nullable=True)
    metaDescription    = Column(Text, nullable=True)
    sortOrder          = Column(Integer, default=0, nullable=False)
    published          = Column(Boolean, default=True, nullable=False)
    createdAt          = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updatedAt          = Column(TIMESTAMP(timezone=True), default=utcnow, server_default=func.now(),
                                onupdate=utcnow, nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    brand_links = relationship("CategoryVehicleBrand", back_populates="category",
                               cascade="all, delete-orphan")
    projects    = relationship("Project", back_populates="category")

    def __repr__(self):
        return f"<Category id={self.id} slug={self.slug}>"
